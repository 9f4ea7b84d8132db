"""Conversion of encoded pitches back to scientific pitch notation and interval names."""

from __future__ import annotations

from typing import Any

from .notation import STEP_NAMES, isPerfectClass, qualityGlyph
from .pitch import Decoded, Interval, Note, Pitch, PitchClass, decode

__all__ = [
    "stepLetter",
    "accidentalGlyphs",
    "renderNote",
    "renderInterval",
    "renderPitch",
    "intervalNumber",
    "intervalAlt",
    "toNoteText",
    "toIntervalText",
    "toPitchText",
]


def stepLetter(step: int) -> str:
    return STEP_NAMES.inv[step]


def accidentalGlyphs(alt: int) -> str:
    """`"#"` repeated for sharps, `"b"` repeated for flats, empty for naturals."""
    return ("b" if alt < 0 else "#") * abs(alt)


def intervalNumber(p: Decoded) -> int:
    """Unsigned number of a decoded interval, such as `9` for a ninth up or down."""
    if p.dir == 1:
        return p.step + 1 + 7 * p.oct
    return (8 - p.step) - 7 * (p.oct + 1)


def intervalAlt(p: Decoded) -> int:
    """Accidental of a decoded interval relative to the perfect or major interval."""
    if p.dir == 1:
        return p.alt
    return -p.alt if isPerfectClass(p.step + 1) else -(p.alt + 1)


def renderNote(pitch: Any) -> str | None:
    """
    Renders a pitch class (`"C#"`) or a note (`"C#4"`). Returns `None` for intervals and for
    anything that is not a pitch.
    """
    pitch = Pitch.fromTuple(pitch)
    if not isinstance(pitch, (PitchClass, Note)):
        return None
    p = decode(pitch)
    octave = "" if p.oct is None else str(p.oct)
    return stepLetter(p.step) + accidentalGlyphs(p.alt) + octave


def renderInterval(pitch: Any) -> str | None:
    """
    Renders an interval with the number first and the quality last, e.g. `"3M"`, `"-5P"`,
    `"9m"`, `"4AA"`. Returns `None` for anything that is not an interval.
    """
    pitch = Pitch.fromTuple(pitch)
    if not isinstance(pitch, Interval):
        return None
    p = decode(pitch)
    num = intervalNumber(p)
    quality = qualityGlyph(num, intervalAlt(p))
    if quality is None:  # inconsistent direction in a raw tuple
        return None
    return f"{p.dir * num}{quality}"


def renderPitch(pitch: Any) -> str | None:
    match Pitch.fromTuple(pitch):
        case Interval() as i:
            return renderInterval(i)
        case PitchClass() | Note() as n:
            return renderNote(n)
        case _:
            return None


def toNoteText(value: Any) -> Any:
    """Renders `value` if it is a pitch, otherwise returns it unchanged."""
    return renderNote(value) if _isPitchValue(value) else value


def toIntervalText(value: Any) -> Any:
    return renderInterval(value) if _isPitchValue(value) else value


def toPitchText(value: Any) -> Any:
    return renderPitch(value) if _isPitchValue(value) else value


def _isPitchValue(value: Any) -> bool:
    return Pitch.fromTuple(value) is not None

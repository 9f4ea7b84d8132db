"""MIDI note numbers, chromatic spelling of MIDI numbers, and well-tempered frequencies."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pyrsistent as pyr

from .errors import ConfigurationError
from .parsing import expectInterval, expectNote
from .pitch import Interval, Note, Pitch, encode
from .render import renderNote
from .utils.number import isInt, isReal

__all__ = [
    "DEFAULT_REFERENCE_HZ",
    "REFERENCE_MIDI",
    "height",
    "semitones",
    "isMidi",
    "midi",
    "chromatic",
    "fromMidi",
    "wellTempered",
    "toFreq",
]

DEFAULT_REFERENCE_HZ = 440
"""Standard tuning reference: A4 = 440 Hz."""

REFERENCE_MIDI = 69
"""MIDI number of A4, the note tuned to the reference frequency."""

# steps of the natural notes by chroma, the other chromas have no natural spelling
_naturalSteps = pyr.pmap({0: 0, 2: 1, 4: 2, 5: 3, 7: 4, 9: 5, 11: 6})


def height(p: Note | Interval) -> int:
    """
    Signed number of semitones of a note above C0 minus one octave, or the signed size of an
    interval in semitones.
    """
    return p.fifths * 7 + 12 * p.octave


def semitones(src: Any) -> int | None:
    """Size of an interval in semitones, negative for descending intervals."""
    i = expectInterval(src)
    if not isinstance(i, Interval):
        return None
    return height(i)


def isMidi(value: Any) -> bool:
    """Judges whether `value` is a valid MIDI note number (from 1 to 128)."""
    return isReal(value) and 0 < value < 129


def midi(value: Any) -> int | float | None:
    """
    MIDI number of a note (`midi("C4") == 60`). A valid MIDI number is returned unchanged.
    Returns `None` for pitch classes, intervals and anything else.
    """
    p = expectNote(value)
    if isinstance(p, Note):
        return height(p) + 12
    if isMidi(value):
        return value
    return None


def chromatic(useSharps: bool) -> Callable[[int], str | None]:
    """
    Returns a function that spells MIDI numbers as note names. Chromas without a natural
    note are spelled with a sharp if `useSharps` is true or with a flat otherwise:

    >>> [chromatic(False)(m) for m in (60, 61, 62)]
    ['C4', 'Db4', 'D4']
    """
    if not isinstance(useSharps, bool):
        raise ConfigurationError(f"`useSharps` must be a boolean, got {useSharps!r}")

    def spell(m: int) -> str | None:
        if not isInt(m):
            return None
        o = m // 12 - 1
        if (step := _naturalSteps.get(m % 12)) is not None:
            p = encode(step, 0, o)
        elif useSharps:
            p = encode(_naturalSteps[(m - 1) % 12], 1, o)
        else:
            p = encode(_naturalSteps[(m + 1) % 12], -1, o)
        return renderNote(p)

    return spell


fromMidi = chromatic(False)
"""Spells a MIDI number as a note name, using flats for the altered notes."""


def wellTempered(reference: float) -> Callable[[Any], float | None]:
    """
    Returns a function that computes the frequency of a note in hertz in 12-tone equal
    temperament, with A4 tuned to `reference`.
    """
    if not isReal(reference) or reference <= 0:
        raise ConfigurationError(
            f"Tuning reference must be a positive frequency, got {reference!r}"
        )

    def freq(pitch: Pitch | str | Any) -> float | None:
        m = midi(pitch)
        if m is None:
            return None
        return 2 ** ((m - REFERENCE_MIDI) / 12) * reference

    return freq


toFreq = wellTempered(DEFAULT_REFERENCE_HZ)
"""Frequency of a note in hertz with A4 = 440 Hz, e.g. `toFreq("A4") == 440.0`."""

"""
Properties of notes and intervals that accept either pitch values or names.

Every function here is built from a function on pitch values by one of the decorators
`noteFn`, `intervalFn` or `pitchFn`: the input is parsed with the matching grammar and a
pitch result is rendered back to text.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from .notation import qualityGlyph
from .parsing import expectInterval, expectNote, expectPitch
from .pitch import FIFTH_OCTS, Interval, Pitch, PitchClass, decode, decodeAlt, decodeStep
from .render import (
    accidentalGlyphs,
    intervalAlt,
    intervalNumber,
    stepLetter,
    toIntervalText,
    toNoteText,
    toPitchText,
)

__all__ = [
    "noteFn",
    "intervalFn",
    "pitchFn",
    "pc",
    "letter",
    "accidentals",
    "octave",
    "simplify",
    "simpleNumber",
    "number",
    "quality",
]


def _pitchFnDecorator(
    expect: Callable[[Any], Pitch | None], render: Callable[[Any], Any]
) -> Callable[[Callable[[Pitch], Any]], Callable[[Any], Any]]:
    def decorator(fn: Callable[[Pitch], Any]) -> Callable[[Any], Any]:
        @wraps(fn)
        def wrapper(src: Any) -> Any:
            p = expect(src)
            return None if p is None else render(fn(p))

        return wrapper

    return decorator


noteFn = _pitchFnDecorator(expectNote, toNoteText)
"""
Turns a function on pitch values into one that also accepts note names, and renders a pitch
result as a note name.
"""

intervalFn = _pitchFnDecorator(expectInterval, toIntervalText)
"""Same as `noteFn`, but for interval names."""

pitchFn = _pitchFnDecorator(expectPitch, toPitchText)
"""Same as `noteFn`, but accepts note names and interval names alike."""


@noteFn
def pc(p: Pitch) -> PitchClass | None:
    """Pitch class of a note, e.g. `pc("C#4") == "C#"`."""
    if isinstance(p, Interval):
        return None
    return PitchClass(p.fifths)


@noteFn
def letter(p: Pitch) -> str | None:
    if isinstance(p, Interval):
        return None
    return stepLetter(p.step)


@noteFn
def accidentals(p: Pitch) -> str | None:
    if isinstance(p, Interval):
        return None
    return accidentalGlyphs(p.alt)


@pitchFn
def octave(p: Pitch) -> int | None:
    """Octave number of a note or an interval. Pitch classes have no octave."""
    return decode(p).oct


@intervalFn
def simplify(p: Pitch) -> Interval | None:
    """
    Reduces a compound interval to a simple one keeping its direction, e.g.
    `simplify("9M") == "2M"` and `simplify("-9M") == "-2M"`.
    """
    if not isinstance(p, Interval):
        return None
    d = p.direction
    step = decodeStep(d * p.fifths)
    alt = decodeAlt(d * p.fifths)
    return Interval(p.fifths, -d * (int(FIFTH_OCTS[step]) + 4 * alt), d)


@intervalFn
def number(p: Pitch) -> int | None:
    """Number of an interval regardless of its direction, e.g. `number("-9m") == 9`."""
    if not isinstance(p, Interval):
        return None
    return intervalNumber(decode(p))


@intervalFn
def simpleNumber(p: Pitch) -> int | None:
    """Number of an interval reduced to the octave, from 1 to 7."""
    if not isinstance(p, Interval):
        return None
    return (intervalNumber(decode(p)) - 1) % 7 + 1


@intervalFn
def quality(p: Pitch) -> str | None:
    if not isinstance(p, Interval):
        return None
    d = decode(p)
    return qualityGlyph(intervalNumber(d), intervalAlt(d))

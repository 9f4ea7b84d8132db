"""
Transposition of pitch classes, notes and intervals by intervals.

On the line of fifths transposition is plain vector addition: the fifths and the octave
components of the interval are added to those of the subject.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .parsing import expectPitch
from .pitch import Interval, Note, Pitch, PitchClass
from .render import renderPitch
from .utils.number import isInt

__all__ = ["transposeBy", "transposeValue", "transpose", "transposer", "octaves"]


def transposeBy(interval: Interval, subject: Pitch) -> Pitch:
    """
    Transposes `subject` by `interval`. Transposing an interval by another one gives their
    sum, whose direction follows the sign of the resulting size.
    """
    match subject:
        case PitchClass(f):
            return PitchClass(interval.fifths + f)
        case Note(f, o):
            return Note(interval.fifths + f, interval.octave + o)
        case Interval(f, o, _):
            f += interval.fifths
            o += interval.octave
            return Interval(f, o, -1 if 7 * f + 12 * o < 0 else 1)
        case _:
            raise TypeError(f"Cannot transpose {subject!r}")


def transposeValue(a: Any, b: Any) -> Pitch | None:
    """
    Same as `transpose`, but returns the pitch value instead of its name.
    """
    pa = expectPitch(a)
    pb = expectPitch(b)
    if pa is None or pb is None:
        return None
    match pa, pb:
        case Interval(), Interval():
            return None
        case Interval(), _:
            return transposeBy(pa, pb)
        case _, Interval():
            return transposeBy(pb, pa)
        case _:
            return None


def transpose(a: Any, b: Any) -> str | None:
    """
    Transposes a pitch class, a note or an interval by an interval. The two arguments can be
    given in any order, as names, pitch values or raw tuples:

    >>> transpose("C4", "3M")
    'E4'
    >>> transpose("M3", "C4")
    'E4'

    Returns `None` unless exactly one of the arguments is an interval.
    """
    return renderPitch(transposeValue(a, b))


def transposer(a: Any) -> Callable[[Any], str | None]:
    """
    Returns a function transposing its argument by `a` (or transposing `a` by its argument,
    if `a` is not an interval). Useful to transpose many pitches by the same interval.
    """
    pa = expectPitch(a)

    def transposeWith(b: Any) -> str | None:
        if pa is None:
            return None
        return transpose(pa, b)

    transposeWith.__qualname__ = f"transposer({a!r})"
    return transposeWith


def octaves(n: int) -> Interval:
    """The interval of `n` octaves, descending when `n` is negative."""
    if not isInt(n):
        raise TypeError(f"Number of octaves must be an integer, got {n!r}")
    return Interval(0, n, -1 if n < 0 else 1)

"""
Operations on lists of pitches.

Lists can be given as Python sequences or as a single string separated by spaces, commas or
bars (`"C4 E4 G4"`, `"C4, E4 | G4"`). Every element is parsed before the operation is applied
and the pitches in the result are rendered back to names, so the functions here map text to
text.
"""

from __future__ import annotations

import logging
import re
import warnings
from collections.abc import Callable
from functools import cmp_to_key, reduce
from typing import Any, Literal, TypeAlias

from .errors import ConfigurationError
from .midi import height
from .parsing import expectPitch
from .pitch import Interval, Note, Pitch, PitchClass
from .render import renderPitch, toPitchText
from .transpose import octaves, transposeBy, transposer
from .utils.cls import noInstance
from .utils.number import gnext, gprev, isInt, sgn

__all__ = [
    "listify",
    "mapPitches",
    "filterPitches",
    "reducePitches",
    "harmonize",
    "sortHeight",
    "Comparators",
    "sortPitches",
    "forceDirection",
]

logger = logging.getLogger(__name__)

Comparator: TypeAlias = Callable[[Pitch | None, Pitch | None], float]
"""A `cmp`-style function over parsed list elements, `None` standing for unparsable ones."""

_separatorRe = re.compile(r"\s*\|\s*|\s*,\s*|\s+")


def listify(src: Any) -> list[Any]:
    """
    Gets a list from a list, a tuple or a separated string. `None` gives an empty list and
    any other value a list with that value only. A raw pitch tuple such as `(0, 4)` is a
    single pitch, not a list.
    """
    if isinstance(src, list):
        return list(src)
    if isinstance(src, tuple):
        return [src] if Pitch.fromTuple(src) is not None else list(src)
    if isinstance(src, str):
        src = src.strip()
        return _separatorRe.split(src) if src else []
    if src is None:
        return []
    return [src]


def _parseList(src: Any) -> list[Pitch | None]:
    return [expectPitch(item) for item in listify(src)]


def _renderResult(value: Any) -> Any:
    # pitches are rendered, lists element-wise, everything else passes through
    if isinstance(value, list):
        return [toPitchText(v) for v in value]
    return toPitchText(value)


def mapPitches(fn: Callable[[Pitch | None], Any], src: Any) -> list[Any]:
    """
    Applies `fn` to every parsed element of `src`. Unparsable elements are passed to `fn` as
    `None`.
    """
    return _renderResult([fn(p) for p in _parseList(src)])


def filterPitches(fn: Callable[[Pitch | None], bool], src: Any) -> list[Any]:
    return _renderResult([p for p in _parseList(src) if fn(p)])


def reducePitches(fn: Callable[[Any, Pitch | None], Any], initial: Any, src: Any) -> Any:
    """
    Folds the parsed elements of `src` with `fn`, starting from `initial`. The result is
    rendered only if it is a pitch or a list; any other accumulator is returned as is.
    """
    return _renderResult(reduce(fn, _parseList(src), initial))


def harmonize(src: Any, pitch: Any) -> list[str | None]:
    """
    Transposes every element of `src` by `pitch`. If `pitch` is a note, `src` is read as a
    list of intervals stacked on it:

    >>> harmonize("1P 3M 5P", "C4")
    ['C4', 'E4', 'G4']
    """
    return list(map(transposer(pitch), _parseList(src)))


def sortHeight(p: Pitch | None) -> float:
    """
    Height used to sort pitches. Pitch classes get an arbitrary height far below any
    reasonable note, and unparsable elements go before everything.
    """
    match p:
        case Note() | Interval():
            return height(p)
        case PitchClass(fifths):
            f = fifths * 7
            return f + 12 * (-(f // 12) - 10)
        case _:
            return float("-inf")


@noInstance
class Comparators:
    """Predefined comparators for `sortPitches()`."""

    @staticmethod
    def ASC(a: Pitch | None, b: Pitch | None) -> int:
        """Lowest first."""
        return sgn(sortHeight(a) - sortHeight(b))

    @staticmethod
    def DESC(a: Pitch | None, b: Pitch | None) -> int:
        """Highest first."""
        return -Comparators.ASC(a, b)


def sortPitches(comparator: bool | Comparator | None, src: Any) -> list[str | None]:
    """
    Sorts a list of pitches. `comparator` comes first, as in `mapPitches()`: `True` (or
    `None`) for ascending order, `False` for descending order, or a custom `cmp`-style
    function. Sorting is stable.

    >>> sortPitches(True, "C4 C3 C5")
    ['C3', 'C4', 'C5']
    """
    if comparator is True or comparator is None:
        comparator = Comparators.ASC
    elif comparator is False:
        comparator = Comparators.DESC
    elif not callable(comparator):
        warnings.warn(
            f"Invalid comparator {comparator!r} is ignored. Sorting in ascending order."
        )
        comparator = Comparators.ASC
    return _renderResult(sorted(_parseList(src), key=cmp_to_key(comparator)))


def _octaveShift(h: int, prev: int, direction: Literal[-1, 1]) -> int:
    # minimal number of octaves moving `h` strictly above (or below) `prev`
    if direction == 1:
        if h > prev:
            return 0
        return (gnext(prev, 12, h % 12) - h) // 12
    if h < prev:
        return 0
    return (gprev(prev, 12, h % 12) - h) // 12


def forceDirection(src: Any, direction: Literal[-1, 1] = 1) -> list[str | None]:
    """
    Moves the notes of a list by octaves so that the melody is strictly ascending
    (`direction == 1`) or strictly descending (`direction == -1`).

    The first element is kept. Each following note is compared with the last kept note and
    moved by the minimal number of octaves when needed. Intervals are handled the same way
    but only against earlier intervals, so that interval sizes are never compared with note
    heights. Pitch classes have no octave and are kept as they are.

    >>> forceDirection(["C4", "G3", "E5"], 1)
    ['C4', 'G4', 'E5']
    """
    if not isInt(direction) or (direction != 1 and direction != -1):
        raise ConfigurationError(f"Direction must be 1 or -1, got {direction!r}")
    result: list[str | None] = []
    prev: dict[type[Pitch], int] = {}
    for p in _parseList(src):
        if isinstance(p, (Note, Interval)):
            kind = type(p)
            h = height(p)
            if kind in prev and (shift := _octaveShift(h, prev[kind], direction)) != 0:
                logger.debug("moving %s by %d octave(s)", p, shift)
                p = transposeBy(octaves(shift), p)
                h += 12 * shift
            prev[kind] = h
        result.append(renderPitch(p))
    return result

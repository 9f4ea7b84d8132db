"""
Grammars of note names in scientific pitch notation (`"C#4"`, `"Bbb"`, `"fx-1"`) and of
interval names (`"3M"`, `"-5P"`, `"M3"`, `"P-5"`, `"4AA"`).

The functions here only tokenize text into primitive records. Turning those records into
encoded pitches is the job of `parsing`.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Literal, NamedTuple

from bidict import bidict
import pyrsistent as pyr

from .utils.number import isInt

__all__ = [
    "STEP_NAMES",
    "INTERVAL_TYPES",
    "INTERVAL_SIZES",
    "NoteName",
    "IntervalName",
    "parseNoteName",
    "parseIntervalName",
    "intervalType",
    "isPerfectClass",
    "qualityGlyph",
]

STEP_NAMES: bidict[str, int] = bidict((name, i) for i, name in enumerate("CDEFGAB"))
"""Letter names and their steps, from C (`0`) to B (`6`)."""

INTERVAL_TYPES = "PMMPPMM"
"""
Quality class of each simple interval number from unison to seventh: `"P"` for the ones that
can be perfect and `"M"` for the ones that can be major or minor.
"""

INTERVAL_SIZES: Sequence[int] = (0, 2, 4, 5, 7, 9, 11)
"""Size in semitones of the perfect or major simple intervals."""

_noteRe = re.compile(r"^([a-gA-G])(#+|b+|x+|)(-?\d*)$")
_intervalNumFirstRe = re.compile(r"^([-+]?)(\d+)(d+|m|M|P|A+)$")
_intervalQualFirstRe = re.compile(r"^(d+|m|M|P|A+)([-+]?)(\d+)$")

# only the two basic qualities have a fixed accidental
_baseQualityAlts = pyr.pmap({("P", "P"): 0, ("M", "M"): 0, ("M", "m"): -1})


class NoteName(NamedTuple):
    letter: str
    acc: str
    step: int
    alt: int
    oct: int | None = None


class IntervalName(NamedTuple):
    num: int
    q: str
    dir: Literal[-1, 1]
    simple: int
    type: Literal["P", "M"]
    alt: int
    oct: int
    size: int


def parseNoteName(src: Any) -> NoteName | None:
    """
    Tokenizes a note name such as `"C#4"`. Double sharps may be written as `x`. Returns
    `None` if `src` is not a note name.
    """
    if not isinstance(src, str):
        return None
    match = _noteRe.fullmatch(src)
    if match is None:
        return None
    letter = match.group(1).upper()
    acc = match.group(2).replace("x", "##")
    alt = -len(acc) if acc.startswith("b") else len(acc)
    octSrc = match.group(3)
    if octSrc == "-":
        return None
    oct = int(octSrc) if octSrc else None
    return NoteName(letter, acc, STEP_NAMES[letter], alt, oct)


def intervalType(num: int) -> Literal["P", "M"]:
    """Quality class of an interval number, ignoring its sign."""
    return INTERVAL_TYPES[(abs(num) - 1) % 7]


def isPerfectClass(num: int) -> bool:
    """Judges whether the interval number can have quality "perfect"."""
    return intervalType(num) == "P"


def _qualityAlt(kind: str, q: str) -> int | None:
    if (alt := _baseQualityAlts.get((kind, q))) is not None:
        return alt
    if q.startswith("A"):
        return len(q)
    if q.startswith("d"):
        return -len(q) if kind == "P" else -len(q) - 1
    # "P" on a major-class number or "M" / "m" on a perfect-class number
    return None


def parseIntervalName(src: Any) -> IntervalName | None:
    """
    Tokenizes an interval name. Both number-first (`"3M"`, `"-5P"`) and quality-first
    (`"M3"`, `"P-5"`) orders are accepted. Returns `None` if `src` is not an interval name.
    """
    if not isinstance(src, str):
        return None
    if (match := _intervalNumFirstRe.fullmatch(src)) is not None:
        sign, numSrc, q = match.groups()
    elif (match := _intervalQualFirstRe.fullmatch(src)) is not None:
        q, sign, numSrc = match.groups()
    else:
        return None
    num = int(numSrc)
    if num == 0:
        return None
    step = (num - 1) % 7
    kind = INTERVAL_TYPES[step]
    alt = _qualityAlt(kind, q)
    if alt is None:
        return None
    dir = -1 if sign == "-" else 1
    oct = (num - 1) // 7
    size = dir * (INTERVAL_SIZES[step] + alt + 12 * oct)
    return IntervalName(num, q, dir, step + 1, kind, alt, oct, size)


def qualityGlyph(num: int, alt: int) -> str | None:
    """
    Quality of an interval given its number and its accidental relative to the perfect or
    major interval, e.g. `qualityGlyph(3, -1) == "m"` and `qualityGlyph(4, 2) == "AA"`.
    """
    if not isInt(num) or not isInt(alt) or num == 0:
        return None
    kind = intervalType(num)
    if alt == 0:
        return kind
    if alt == -1 and kind == "M":
        return "m"
    if alt > 0:
        return "A" * alt
    return "d" * (-alt if kind == "P" else -(alt + 1))

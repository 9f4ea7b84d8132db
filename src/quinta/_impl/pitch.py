"""
Line-of-fifths encoding of pitch classes, notes and intervals.

Every pitch is stored as a short tuple of integers. The first component counts perfect
fifths from C, so a pitch class is fully described by a single integer: sharpening a pitch
moves it 7 fifths up the line and flattening moves it 7 fifths down. The second component
is an octave offset chosen so that `fifths * 7 + octave * 12` is the height of the pitch in
semitones, and the third one, present only for intervals, is the direction.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Literal, NamedTuple, Self

import numpy as np

from .utils.cls import cachedGetter
from .utils.number import isInt, isReal

__all__ = [
    "FIFTHS",
    "STEPS",
    "FIFTH_OCTS",
    "Decoded",
    "Pitch",
    "PitchClass",
    "Note",
    "Interval",
    "encode",
    "decode",
    "unaltered",
    "decodeStep",
    "decodeAlt",
    "isPitch",
    "isPitchClass",
    "hasOctave",
    "isNote",
    "isInterval",
]

STEPS: Sequence[int] = np.arange(-1, 6) * 4 % 7
"""
Letter steps in line of fifths order, starting from F.

*Value*: `np.array([3, 0, 4, 1, 5, 2, 6])`
"""
STEPS.flags.writeable = False

FIFTHS: Sequence[int] = np.argsort(STEPS) - 1
"""
Position of each natural letter from C to B on the line of fifths.

*Value*: `np.array([0, 2, 4, -1, 1, 3, 5])`
"""
FIFTHS.flags.writeable = False

FIFTH_OCTS: Sequence[int] = FIFTHS * 7 // 12
"""
Number of octaves spanned by the fifths of each natural letter.

*Value*: `np.array([0, 1, 2, -1, 0, 1, 2])`
"""
FIFTH_OCTS.flags.writeable = False


def _resolveInt(x: Any, name: str) -> int:
    if not isInt(x):
        raise TypeError(f"`{name}` must be an integer, got {x!r}")
    return int(x)


class Decoded(NamedTuple):
    """Letter step, accidental, octave and direction of an encoded pitch."""

    step: int
    alt: int
    oct: int | None = None
    dir: Literal[-1, 1] | None = None


def unaltered(fifths: int) -> int:
    """Position of a pitch class on the line of fifths with its accidentals removed."""
    return (fifths + 1) % 7


def decodeStep(fifths: int) -> int:
    return int(STEPS[unaltered(fifths)])


def decodeAlt(fifths: int) -> int:
    return (fifths + 1) // 7


class Pitch(metaclass=ABCMeta):
    """
    Base type of encoded pitches. A pitch is exactly one of `PitchClass`, `Note` or
    `Interval`, and behaves as the tuple of integers it encodes.
    """

    __slots__ = ("_hash",)

    @classmethod
    def fromTuple(cls, src: Any) -> Pitch | None:
        """
        Converts a raw tuple of 1 to 3 integers to the corresponding pitch type. Returns `None`
        if `src` is not a valid encoded pitch.
        """
        if isinstance(src, Pitch):
            return src
        if not isinstance(src, (tuple, list)) or not all(map(isInt, src)):
            return None
        match tuple(src):
            case (f,):
                return PitchClass(f)
            case (f, o):
                return Note(f, o)
            case (f, o, d) if d == 1 or d == -1:
                return Interval(f, o, d)
            case _:
                return None

    @property
    @abstractmethod
    def fifths(self) -> int:
        """Position on the line of fifths."""
        raise NotImplementedError

    @abstractmethod
    def astuple(self) -> tuple[int, ...]:
        raise NotImplementedError

    def decode(self) -> Decoded:
        return decode(self)

    @property
    def step(self) -> int:
        """Letter step from 0 (C) to 6 (B)."""
        return decodeStep(self.fifths)

    @property
    def alt(self) -> int:
        """Number of sharps (positive) or flats (negative)."""
        return decodeAlt(self.fifths)

    @property
    def oct(self) -> int | None:
        return self.decode().oct

    def __len__(self) -> int:
        return len(self.astuple())

    def __iter__(self) -> Iterator[int]:
        return iter(self.astuple())

    def __getitem__(self, key: int | slice) -> int | tuple[int, ...]:
        return self.astuple()[key]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.__class__ is other.__class__ and self.astuple() == other.astuple()

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.astuple()))

    def __add__(self, other: Any) -> Pitch:
        if not isinstance(other, Pitch):
            return NotImplemented
        from .transpose import transposeBy  # avoid cyclic import

        if isinstance(self, Interval):
            return transposeBy(self, other)
        if isinstance(other, Interval):
            return transposeBy(other, self)
        return NotImplemented

    __radd__ = __add__

    def __str__(self) -> str:
        from .render import renderPitch  # avoid cyclic import

        return renderPitch(self)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self

    def __reduce__(self) -> tuple[Callable[..., Self], tuple[int, ...]]:
        return (self.__class__, self.astuple())


class PitchClass(Pitch):
    """A pitch without octave, such as `C#`."""

    __match_args__ = ("fifths",)
    __slots__ = ("_fifths",)
    _fifths: int

    def __new__(cls, fifths: int) -> Self:
        self = super().__new__(cls)
        self._fifths = _resolveInt(fifths, "fifths")
        return self

    @property
    def fifths(self) -> int:
        return self._fifths

    def astuple(self) -> tuple[int]:
        return (self._fifths,)


class Note(Pitch):
    """A pitch class placed in a specific octave, such as `C#4`."""

    __match_args__ = ("fifths", "octave")
    __slots__ = ("_fifths", "_octave")
    _fifths: int
    _octave: int

    def __new__(cls, fifths: int, octave: int) -> Self:
        self = super().__new__(cls)
        self._fifths = _resolveInt(fifths, "fifths")
        self._octave = _resolveInt(octave, "octave")
        return self

    @property
    def fifths(self) -> int:
        return self._fifths

    @property
    def octave(self) -> int:
        """Encoded octave component. See `oct` for the octave number."""
        return self._octave

    def astuple(self) -> tuple[int, int]:
        return (self._fifths, self._octave)


class Interval(Pitch):
    """
    A directed interval, such as a major third up (`3M`) or a perfect fifth down (`-5P`).

    Descending intervals are stored negated, so that the height `fifths * 7 + octave * 12` is
    always the signed size of the interval in semitones.
    """

    __match_args__ = ("fifths", "octave", "direction")
    __slots__ = ("_fifths", "_octave", "_direction")
    _fifths: int
    _octave: int
    _direction: Literal[-1, 1]

    def __new__(cls, fifths: int, octave: int, direction: Literal[-1, 1] = 1) -> Self:
        direction = _resolveInt(direction, "direction")
        if direction != 1 and direction != -1:
            raise ValueError(f"Interval direction must be 1 or -1, got {direction}")
        self = super().__new__(cls)
        self._fifths = _resolveInt(fifths, "fifths")
        self._octave = _resolveInt(octave, "octave")
        self._direction = direction
        return self

    @property
    def fifths(self) -> int:
        return self._fifths

    @property
    def octave(self) -> int:
        return self._octave

    @property
    def direction(self) -> Literal[-1, 1]:
        return self._direction

    @property
    def dir(self) -> Literal[-1, 1]:
        return self._direction

    @property
    def number(self) -> int:
        """Interval number, such as `3` for a third or `9` for a ninth."""
        from .properties import number  # avoid cyclic import

        return number(self)

    @property
    def quality(self) -> str:
        from .properties import quality  # avoid cyclic import

        return quality(self)

    def astuple(self) -> tuple[int, int, int]:
        return (self._fifths, self._octave, self._direction)


def encode(
    step: int, alt: int = 0, octave: int | None = None, direction: int | None = None
) -> Pitch | None:
    """
    Encodes a letter step (0 for C to 6 for B, or the simple interval number minus one),
    an accidental, an optional octave and an optional direction into a pitch.

    Returns a `PitchClass` when `octave` is omitted, a `Note` when `direction` is omitted
    and an `Interval` otherwise. Returns `None` if `step` is not an integer from 0 to 6.
    """
    if not isInt(step) or step < 0 or step > 6:
        return None
    if alt is None:
        alt = 0
    if not isInt(alt):
        return None
    step = int(step)
    fifths = int(FIFTHS[step]) + 7 * alt
    if octave is None:
        return PitchClass(fifths)
    if not isInt(octave):
        return None
    o = octave - int(FIFTH_OCTS[step]) - 4 * alt
    if direction is None:
        return Note(fifths, o)
    if not isReal(direction):
        return None
    d = -1 if direction < 0 else 1
    return Interval(d * fifths, d * o, d)


def decode(pitch: Pitch | Sequence[int]) -> Decoded | None:
    """
    Decodes a pitch back to its letter step, accidental, octave and direction. The octave is
    `None` for pitch classes and the direction is `None` for anything but intervals.
    """
    pitch = Pitch.fromTuple(pitch)
    if pitch is None:
        return None
    step = decodeStep(pitch.fifths)
    alt = decodeAlt(pitch.fifths)
    match pitch:
        case PitchClass():
            return Decoded(step, alt)
        case Note(_, o):
            return Decoded(step, alt, o + 4 * alt + int(FIFTH_OCTS[step]))
        case Interval(_, o, d):
            return Decoded(step, alt, o + 4 * alt + int(FIFTH_OCTS[step]), d)
        case _:
            return None


def isPitch(obj: Any) -> bool:
    """Judges whether `obj` is a pitch, either a pitch object or a raw tuple."""
    return Pitch.fromTuple(obj) is not None


def isPitchClass(obj: Any) -> bool:
    return isinstance(Pitch.fromTuple(obj), PitchClass)


def hasOctave(obj: Any) -> bool:
    """Judges whether `obj` is a pitch carrying an octave, i.e. a note or an interval."""
    return isinstance(Pitch.fromTuple(obj), (Note, Interval))


def isNote(obj: Any) -> bool:
    return isinstance(Pitch.fromTuple(obj), Note)


def isInterval(obj: Any) -> bool:
    return isinstance(Pitch.fromTuple(obj), Interval)

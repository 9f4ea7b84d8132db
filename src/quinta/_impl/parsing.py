"""
Conversion of note and interval names into encoded pitches.

Parsing the same literal again and again is common (scales and chords are usually written
as text), so every `PitchParser` memoizes its results in two `ParseCache` objects, one per
grammar. The module-level functions use a shared default parser which can be replaced with
`setDefaultParser()`.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

from .errors import ConfigurationError
from .notation import parseIntervalName, parseNoteName
from .pitch import Interval, Pitch, encode
from .utils.number import isInt

__all__ = [
    "ParseCache",
    "PitchParser",
    "getDefaultParser",
    "setDefaultParser",
    "parseNote",
    "parseInterval",
    "parsePitch",
    "expectPitch",
    "expectNote",
    "expectInterval",
]

logger = logging.getLogger(__name__)

_MISSING = object()

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ParseCache(Generic[K, V]):
    """
    A memo of parse results keyed by the literal text. Failed parses are remembered too.

    The cache is unbounded by default. When `maxsize` is given, the least recently used entry
    is dropped once the cache is full.
    """

    __slots__ = ("_data", "_maxsize", "hits", "misses")

    def __init__(self, maxsize: int | None = None):
        if maxsize is not None and (not isInt(maxsize) or maxsize <= 0):
            raise ConfigurationError(
                f"Cache size must be a positive integer or `None`, got {maxsize!r}"
            )
        self._data: OrderedDict[K, V] = OrderedDict()
        self._maxsize = maxsize
        self.hits = 0
        self.misses = 0

    @property
    def maxsize(self) -> int | None:
        return self._maxsize

    def get(self, key: K, default: Any = None) -> V | Any:
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            return default
        if self._maxsize is not None:
            self._data.move_to_end(key)
        return value

    def put(self, key: K, value: V) -> None:
        self._data[key] = value
        if self._maxsize is not None:
            self._data.move_to_end(key)
            while len(self._data) > self._maxsize:
                evicted, _ = self._data.popitem(last=False)
                logger.debug("evicted %r from parse cache", evicted)

    def fetch(self, key: K, compute: Callable[[K], V]) -> V:
        """Returns the cached value of `key`, computing and storing it on a miss."""
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            self.hits += 1
            return value
        self.misses += 1
        value = compute(key)
        self.put(key, value)
        return value

    def clear(self) -> None:
        self._data.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(size={len(self)}, maxsize={self._maxsize}, "
            f"hits={self.hits}, misses={self.misses})"
        )


def _buildNote(src: str) -> Pitch | None:
    n = parseNoteName(src)
    if n is None:
        logger.debug("%r is not a note name", src)
        return None
    return encode(n.step, n.alt, n.oct)


def _buildInterval(src: str) -> Interval | None:
    i = parseIntervalName(src)
    if i is None:
        logger.debug("%r is not an interval name", src)
        return None
    return encode(i.simple - 1, i.alt, i.oct, i.dir)


class PitchParser:
    """
    Parses note and interval names into pitches.

    By default each parser owns two fresh unbounded caches. Pass caches explicitly to bound
    or share them, or `cached=False` to parse every time.
    """

    __slots__ = ("_noteCache", "_intervalCache")

    def __init__(
        self,
        noteCache: ParseCache[str, Pitch | None] | None = None,
        intervalCache: ParseCache[str, Pitch | None] | None = None,
        *,
        cached: bool = True,
    ):
        if cached:
            noteCache = ParseCache() if noteCache is None else noteCache
            intervalCache = ParseCache() if intervalCache is None else intervalCache
        self._noteCache = noteCache
        self._intervalCache = intervalCache

    @property
    def noteCache(self) -> ParseCache[str, Pitch | None] | None:
        return self._noteCache

    @property
    def intervalCache(self) -> ParseCache[str, Pitch | None] | None:
        return self._intervalCache

    @staticmethod
    def _parseWith(
        src: Any,
        cache: ParseCache[str, Pitch | None] | None,
        build: Callable[[str], Pitch | None],
    ) -> Pitch | None:
        if not isinstance(src, str):
            return None
        if cache is None:
            return build(src)
        return cache.fetch(src, build)

    def parseNote(self, src: Any) -> Pitch | None:
        """Parses a note name such as `"C#4"` or a pitch class name such as `"Db"`."""
        return self._parseWith(src, self._noteCache, _buildNote)

    def parseInterval(self, src: Any) -> Interval | None:
        """Parses an interval name such as `"3M"` or `"P-5"`."""
        return self._parseWith(src, self._intervalCache, _buildInterval)

    def parsePitch(self, src: Any) -> Pitch | None:
        """Parses a note name, falling back to an interval name."""
        result = self.parseNote(src)
        if result is None:
            result = self.parseInterval(src)
        return result

    def clear(self) -> None:
        for cache in (self._noteCache, self._intervalCache):
            if cache is not None:
                cache.clear()


_defaultParser = PitchParser()


def getDefaultParser() -> PitchParser:
    return _defaultParser


def setDefaultParser(parser: PitchParser) -> PitchParser:
    """
    Replaces the parser used by the module-level parsing functions. Returns the previous
    one so that it can be restored.
    """
    global _defaultParser
    if not isinstance(parser, PitchParser):
        raise TypeError(f"Expected a `PitchParser`, got {parser!r}")
    previous, _defaultParser = _defaultParser, parser
    return previous


def parseNote(src: Any) -> Pitch | None:
    return _defaultParser.parseNote(src)


def parseInterval(src: Any) -> Interval | None:
    return _defaultParser.parseInterval(src)


def parsePitch(src: Any) -> Pitch | None:
    return _defaultParser.parsePitch(src)


def _expect(parse: Callable[[Any], Pitch | None]) -> Callable[[Any], Pitch | None]:
    def expect(src: Any) -> Pitch | None:
        if isinstance(src, str):
            return parse(src)
        return Pitch.fromTuple(src)

    return expect


expectPitch = _expect(parsePitch)
expectPitch.__doc__ = """
Accepts a pitch object, a raw encoded tuple or a note / interval name and returns the
pitch, or `None` if the value is not a pitch.
"""
expectNote = _expect(parseNote)
expectInterval = _expect(parseInterval)

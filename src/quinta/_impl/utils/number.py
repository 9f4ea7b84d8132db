from numbers import Integral, Real
from typing import Any, Literal

__all__ = ["isInt", "isReal", "sgn", "gnext", "gprev"]


def isInt(x: Any) -> bool:
    """Judges whether `x` is an integer. Booleans are not regarded as integers."""
    return isinstance(x, Integral) and not isinstance(x, bool)


def isReal(x: Any) -> bool:
    """Judges whether `x` is a real number. Booleans are not regarded as real numbers."""
    return isinstance(x, Real) and not isinstance(x, bool)


def sgn(x: Real) -> Literal[-1, 0, 1]:
    return (x > 0) - (x < 0)


def gnext(n: int, k: int, rem: int = 0, strict: bool = True) -> int:
    """First number congruent to `rem` modulo `k` after `n` (or at `n` if not `strict`)."""
    if strict:
        return n + (rem - n - 1) % k + 1
    return n + (rem - n) % k


def gprev(n: int, k: int, rem: int = 0, strict: bool = True) -> int:
    """Last number congruent to `rem` modulo `k` before `n` (or at `n` if not `strict`)."""
    if strict:
        return n - (n - rem - 1) % k - 1
    return n - (n - rem) % k

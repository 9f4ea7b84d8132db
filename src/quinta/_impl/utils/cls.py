from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

__all__ = ["cachedGetter", "noInstance"]

_MISSING = object()

T = TypeVar("T")
P = TypeVar("P")


def cachedGetter(fget: Callable[[T], P]) -> Callable[[T], P]:
    """
    Caches the result of a no-argument method on the instance, in the attribute named after
    the method with a single leading underscore (`_hash` for `__hash__`, `_size` for `size`).
    Slotted classes must list that attribute in `__slots__`.
    """
    key = "_" + fget.__name__.strip("_")

    def wrapper(self: T) -> P:
        if (value := getattr(self, key, _MISSING)) is _MISSING:
            value = fget(self)
            setattr(self, key, value)
        return value

    wrapper.__name__ = fget.__name__
    wrapper.__doc__ = fget.__doc__
    return wrapper


def noInstance(cls: type[T]) -> type[T]:
    """
    Marks a class as a pure namespace. Trying to instantiate it raises `TypeError`.
    """

    def __new__(cls, *args: Any, **kwargs: Any):
        raise TypeError(f"{cls.__name__} is a namespace and cannot be instantiated.")

    cls.__new__ = __new__
    return cls

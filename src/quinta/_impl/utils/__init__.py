from .cls import cachedGetter, noInstance  # noqa: F401
from .number import isInt, isReal, sgn, gnext, gprev  # noqa: F401

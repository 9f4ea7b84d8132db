"""
# `quinta`: Music Theory Arithmetic on the Line of Fifths

This is the top-level module of the `quinta` library. Notes, pitch classes and intervals are
encoded as short tuples of integers on the line of fifths, which makes transposition, MIDI
and frequency conversion plain integer arithmetic. Every function accepts pitch values, raw
tuples or names such as `"C#4"` and `"3M"`, and returns names.
"""

from ._impl import *  # noqa: F401, F403

"""
Given names.

Every name is ``onset + vowel + middle + ending``. Onsets and middles hold no
vowels and every ending starts with one, so each name splits back into its
parts in exactly one way and the list cannot contain duplicates.
"""

from typing import Final

_ONSETS: Final = (
    "B", "Br", "C", "Ch", "Cl", "D", "Dr", "F",
    "Fl", "G", "Gl", "Gr", "H", "J", "K", "Kr",
    "L", "M", "N", "P", "Pr", "R", "S", "Sh",
    "Sl", "St", "T", "Th", "Tr", "V", "W", "Z",
)
_VOWELS: Final = ("a", "e", "i", "o")
_MIDDLES: Final = (
    "l", "n", "r", "s", "m", "d", "v", "th",
    "nd", "rl", "ll", "ss", "ld", "nn", "rr", "nt",
)
_ENDINGS: Final = ("a", "e", "o", "ia", "ine", "ette", "on", "an")

# onset varies fastest so neighbouring indices start with different letters
WORDS: Final[tuple[str, ...]] = tuple(
    f"{onset}{vowel}{middle}{ending}"
    for ending in _ENDINGS
    for middle in _MIDDLES
    for vowel in _VOWELS
    for onset in _ONSETS
)

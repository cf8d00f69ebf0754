"""uuid-readable: human readable sentences derived from UUIDs."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("uuid-readable")
except PackageNotFoundError:
    __version__ = "dev"

from ._strict import disable_strict, enable_strict
from .category import WordCategory, WordTable, get_table, list_categories
from .errors import (
    CategoryError,
    ConnectiveError,
    ContractViolation,
    DecodeError,
    NumeralError,
    ProfileError,
    ReadableError,
    SentenceLengthError,
    TokenError,
    WordListError,
    WordNotFoundError,
)
from .profile import NORMAL, SHORT, Profile, Slot, get_profile, list_profiles
from .readable import (
    decode,
    encode,
    generate,
    generate_from,
    generate_inverse,
    short,
    short_from,
)

__all__ = [
    "generate",
    "generate_from",
    "generate_inverse",
    "short",
    "short_from",
    "encode",
    "decode",
    "Profile",
    "Slot",
    "NORMAL",
    "SHORT",
    "get_profile",
    "list_profiles",
    "WordCategory",
    "WordTable",
    "get_table",
    "list_categories",
    "enable_strict",
    "disable_strict",
    "ReadableError",
    "DecodeError",
    "SentenceLengthError",
    "WordNotFoundError",
    "NumeralError",
    "ConnectiveError",
    "ProfileError",
    "TokenError",
    "CategoryError",
    "WordListError",
    "ContractViolation",
]

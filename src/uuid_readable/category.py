"""Word categories and the lookup tables built from their word lists."""

import logging
from collections import Counter
from collections.abc import Iterator, Sequence
from enum import Enum
from functools import cache
from importlib import import_module
from typing import Final

import regex as re

from .errors import CategoryError, ContractViolation, WordListError, WordNotFoundError

log = logging.getLogger(__name__)

WORDLIST_PACKAGE: Final[str] = "uuid_readable._wordlists"

# a usable word is a single run of non-whitespace characters
_WORD_PAT: Final = re.compile(r"\S+")


class WordCategory(str, Enum):
    """Named word lists a profile slot can draw from."""

    NAMES = "names"
    PERSONAL_NOUNS = "personal_nouns"
    PLACES = "places"
    VERBS = "verbs"
    ADJECTIVES = "adjectives"
    ANIMALS = "animals"

    @classmethod
    def get(cls, name: str) -> "WordCategory":
        """Get category by name (case-insensitive, ``-`` and ``_`` interchangeable)."""
        try:
            return cls[name.upper().replace("-", "_")]
        except KeyError:
            raise CategoryError(
                "unknown category",
                invalid_name=name,
                available=list_categories(),
            )


class WordTable:
    """
    Ordered, duplicate-free word list with lookups in both directions.

    Instances are read-only once built. Use :func:`get_table` rather than
    constructing them directly so each category is built once per process.
    """

    def __init__(self, category: WordCategory, words: Sequence[str]) -> None:
        """
        Validate ``words`` and build the reverse index.

        :param category: Category the words belong to.
        :param words: Words in index order.
        :raises WordListError: If a word is duplicated, empty or contains whitespace.
        """
        _check_words(category, words)
        self.category = category
        self.words: tuple[str, ...] = tuple(words)
        self._index: dict[str, int] = {word: i for i, word in enumerate(self.words)}

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __repr__(self) -> str:
        return f"WordTable({self.category.value!r}, {len(self.words)} words)"

    def word_at(self, index: int) -> str:
        """Return the word stored at ``index``."""
        if not 0 <= index < len(self.words):
            raise ContractViolation(
                f"index {index} out of range for {self.category.value} ({len(self.words)} words)"
            )
        return self.words[index]

    def index_of(self, word: str) -> int:
        """
        Return the index of ``word``.

        Matching is exact: no case folding and no punctuation stripping.

        :raises WordNotFoundError: If the word is not in this category.
        """
        try:
            return self._index[word]
        except KeyError:
            raise WordNotFoundError(
                "word not found in category", category=self.category.value, word=word
            )


def _check_words(category: WordCategory, words: Sequence[str]) -> None:
    """Reject word lists that would break whitespace splitting or reverse lookups."""
    malformed = [word for word in words if not _WORD_PAT.fullmatch(word)]
    if malformed:
        raise WordListError(
            "words must be non-empty and free of whitespace",
            category=category.value,
            words=malformed,
        )

    duplicates = sorted(word for word, n in Counter(words).items() if n > 1)
    if duplicates:
        raise WordListError(
            "duplicate words in list", category=category.value, words=duplicates
        )


@cache
def _load_table(category: WordCategory) -> WordTable:
    module = import_module(f"{WORDLIST_PACKAGE}.{category.value}")
    table = WordTable(category, module.WORDS)
    log.debug(f"built {category.value} table with {len(table)} words")
    return table


def get_table(category: WordCategory | str) -> WordTable:
    """
    Return the process-wide table for a category.

    :param category: A :class:`WordCategory` or its name.
    :raises CategoryError: If the name is unknown.
    """
    if not isinstance(category, WordCategory):
        category = WordCategory.get(category)
    return _load_table(category)


def list_categories() -> list[str]:
    """Return available word category names."""
    return [category.value for category in WordCategory]


__all__ = [
    "WordCategory",
    "WordTable",
    "get_table",
    "list_categories",
]

"""Sentence profiles: bit widths, slot kinds and the template they fill."""

import logging
from dataclasses import dataclass
from functools import cache
from typing import Final, Literal, TypeAlias

import regex as re

from .category import WordCategory, get_table
from .errors import ContractViolation, ProfileError
from .segment import TOKEN_BITS
from .types import Widths

log = logging.getLogger(__name__)

# connectives must survive whitespace splitting as exactly one token
_CONNECTIVE_PAT: Final = re.compile(r"\S+")


@dataclass(frozen=True, slots=True)
class Slot:
    """One segment of the token, rendered as a category word or a number."""

    width: int
    # None renders the segment value as a decimal literal
    category: WordCategory | None = None

    @property
    def is_numeric(self) -> bool:
        return self.category is None


TemplatePart: TypeAlias = str | Slot


@dataclass(frozen=True)
class Profile:
    """
    A named sentence layout.

    ``template`` lists the sentence tokens in order: plain strings are fixed
    connective words, :class:`Slot` entries are filled from the token bits.
    Widths and slots are derived from the template so they always line up.
    """

    name: str
    template: tuple[TemplatePart, ...]

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(part for part in self.template if isinstance(part, Slot))

    @property
    def widths(self) -> Widths:
        return tuple(slot.width for slot in self.slots)

    @property
    def bit_length(self) -> int:
        """Number of token bits the profile consumes."""
        return sum(self.widths)

    @property
    def token_count(self) -> int:
        """Number of whitespace-separated tokens in a sentence."""
        return len(self.template)

    @property
    def invertible(self) -> bool:
        """Whether a sentence carries the whole token and can be decoded."""
        return self.bit_length == TOKEN_BITS

    def describe(self) -> str:
        """Render the template with ``{category}`` and ``{number}`` placeholders."""
        rendered = []
        for part in self.template:
            if isinstance(part, Slot):
                label = "number" if part.is_numeric else part.category.value
                rendered.append(f"{{{label}}}")
            else:
                rendered.append(part)
        return " ".join(rendered)


_N = WordCategory.NAMES

NORMAL: Final[Profile] = Profile(
    "normal",
    (
        Slot(12, _N),
        Slot(11, _N),
        Slot(14, _N),
        "the",
        Slot(13, WordCategory.PERSONAL_NOUNS),
        "of",
        Slot(13, WordCategory.PLACES),
        Slot(10, WordCategory.VERBS),
        Slot(12, _N),
        Slot(11, _N),
        Slot(14, _N),
        "and",
        Slot(5),
        Slot(6, WordCategory.ADJECTIVES),
        Slot(7, WordCategory.ANIMALS),
    ),
)

# low entropy: only the leading 32 bits of the token are used
SHORT: Final[Profile] = Profile(
    "short",
    (
        Slot(6, _N),
        Slot(6, WordCategory.VERBS),
        "by",
        Slot(7),
        Slot(8, WordCategory.ADJECTIVES),
        Slot(5, WordCategory.ANIMALS),
    ),
)

ProfileName = Literal["normal", "short"]

_PROFILES: Final[dict[str, Profile]] = {
    "normal": NORMAL,
    "short": SHORT,
}


@cache
def check_profile(profile: Profile) -> Profile:
    """
    Verify a profile against the word tables it references.

    Runs once per profile. Connectives must be single whitespace-free words
    so sentences split back at the template positions. Every category slot
    of width ``w`` needs at least ``2**w`` words, otherwise some segment
    values have no word.

    :raises ContractViolation: If the profile cannot be rendered.
    """
    if not profile.slots:
        raise ContractViolation(f"profile {profile.name!r} has no slots")
    if profile.bit_length > TOKEN_BITS:
        raise ContractViolation(
            f"profile {profile.name!r} needs {profile.bit_length} bits, token has {TOKEN_BITS}"
        )

    for part in profile.template:
        if isinstance(part, str) and not _CONNECTIVE_PAT.fullmatch(part):
            raise ContractViolation(
                f"profile {profile.name!r} has connective {part!r}, expected a single word"
            )

    for slot in profile.slots:
        if slot.width <= 0:
            raise ContractViolation(f"profile {profile.name!r} has a slot of width {slot.width}")
        if slot.is_numeric:
            continue
        size = len(get_table(slot.category))
        if size < 1 << slot.width:
            raise ContractViolation(
                f"profile {profile.name!r}: {slot.category.value} has {size} words, "
                f"a {slot.width}-bit slot needs {1 << slot.width}"
            )

    log.debug(
        f"profile {profile.name!r} checked: {len(profile.slots)} slots, {profile.bit_length} bits"
    )
    return profile


def list_profiles() -> list[str]:
    """Return available profile names."""
    return list(_PROFILES.keys())


def get_profile(name: "ProfileName | str | Profile" = "normal") -> Profile:
    """
    Look up a profile by name and make sure it is usable.

    A :class:`Profile` instance is accepted as-is so custom layouts go
    through the same checks as the built-in ones.

    :param name: Profile name ("normal" or "short") or a profile instance.
    :raises ProfileError: If the name is unknown.
    :raises ContractViolation: If the profile does not fit its word tables.
    """
    if isinstance(name, Profile):
        return check_profile(name)

    key = name.lower()
    if key not in _PROFILES:
        raise ProfileError(
            "unknown profile name", invalid_name=name, available=list_profiles()
        )
    return check_profile(_PROFILES[key])


__all__ = [
    "Slot",
    "TemplatePart",
    "Profile",
    "ProfileName",
    "NORMAL",
    "SHORT",
    "check_profile",
    "list_profiles",
    "get_profile",
]

"""
Compose sentences from segment values and split them back apart.

A sentence is the profile template with every slot replaced by a word from
its category, or by the decimal value for numeric slots, joined with single
spaces.
"""

import logging
from collections.abc import Sequence
from typing import Final

import regex as re

from ._strict import _is_enabled
from .category import get_table
from .errors import (
    ConnectiveError,
    ContractViolation,
    NumeralError,
    SentenceLengthError,
    WordNotFoundError,
)
from .profile import Profile, Slot
from .types import SegmentValue

log = logging.getLogger(__name__)

_TOKEN_PAT: Final = re.compile(r"\S+")
# ascii digits only: int() would also take signs, underscores and non-latin digits
_NUMERAL_PAT: Final = re.compile(r"[0-9]+")


def split_sentence(sentence: str) -> list[str]:
    """Split a sentence into tokens on runs of whitespace."""
    return _TOKEN_PAT.findall(sentence)


def compose(profile: Profile, values: Sequence[SegmentValue]) -> str:
    """
    Render segment values into a sentence following ``profile``.

    :param profile: Profile whose template is filled.
    :param values: One value per slot, in slot order.
    :returns: The sentence, tokens separated by single spaces.
    """
    if len(values) != len(profile.slots):
        raise ContractViolation(
            f"{len(values)} values given for {len(profile.slots)} slots of {profile.name!r}"
        )

    remaining = iter(values)
    tokens: list[str] = []
    for part in profile.template:
        if isinstance(part, Slot):
            tokens.append(_render_slot(part, next(remaining)))
        else:
            tokens.append(part)
    return " ".join(tokens)


def _render_slot(slot: Slot, value: SegmentValue) -> str:
    if not 0 <= value < 1 << slot.width:
        raise ContractViolation(f"value {value} does not fit a {slot.width}-bit slot")
    if slot.is_numeric:
        return str(value)
    return get_table(slot.category).word_at(value)


def decompose(
    profile: Profile, sentence: str, strict: bool | None = None
) -> list[SegmentValue]:
    """
    Recover the segment values of a sentence produced with ``profile``.

    Tokens are read from the fixed template positions. Tokens past the end
    of the template are ignored. Connective words are only compared to the
    template in strict mode.

    :param profile: Profile the sentence was composed with.
    :param sentence: The sentence to read.
    :param strict: Check connective words; ``None`` uses the global setting.
    :returns: One value per slot, in slot order.
    :raises SentenceLengthError: If the sentence has too few tokens.
    :raises WordNotFoundError: If a word is missing from its slot's category.
    :raises NumeralError: If the numeric slot is not a decimal that fits its width.
    :raises ConnectiveError: In strict mode, if a connective word differs.
    """
    tokens = split_sentence(sentence)
    if len(tokens) < profile.token_count:
        raise SentenceLengthError(
            f"sentence too short for profile {profile.name!r}",
            expected=profile.token_count,
            got=len(tokens),
        )
    if len(tokens) > profile.token_count:
        log.debug(f"ignoring {len(tokens) - profile.token_count} trailing tokens")

    if strict is None:
        strict = _is_enabled()

    values: list[SegmentValue] = []
    for position, part in enumerate(profile.template):
        token = tokens[position]
        if isinstance(part, Slot):
            values.append(_parse_slot(part, token, position))
        elif strict and token != part:
            raise ConnectiveError(
                "unexpected connective word", expected=part, got=token, position=position
            )

    log.debug(f"decoded {len(values)} segment values with profile {profile.name!r}")
    return values


def _parse_slot(slot: Slot, token: str, position: int) -> SegmentValue:
    """Turn one sentence token back into its segment value."""
    if slot.is_numeric:
        if not _NUMERAL_PAT.fullmatch(token):
            raise NumeralError(
                "expected a decimal number", token=token, width=slot.width, position=position
            )
        # bound the digit count before int(), which refuses very long strings
        digits = token.lstrip("0") or "0"
        if len(digits) > len(str((1 << slot.width) - 1)) or int(digits) >= 1 << slot.width:
            raise NumeralError(
                "number out of range", token=token, width=slot.width, position=position
            )
        return int(digits)

    try:
        return get_table(slot.category).index_of(token)
    except WordNotFoundError as e:
        # attach the sentence position
        raise WordNotFoundError(
            "unknown word in sentence",
            category=e.category,
            word=e.word,
            position=position,
        ) from e


__all__ = ["split_sentence", "compose", "decompose"]

"""
Turn UUIDs into readable sentences and back.

``generate`` sentences carry all 128 bits of the UUID and can be decoded
with ``generate_inverse``. ``short`` sentences only use the leading 32 bits:
they are easier to remember, collide far more often and cannot be decoded.
"""

import logging
import uuid

from .errors import ProfileError, TokenError
from .profile import Profile, ProfileName, get_profile
from .segment import TOKEN_BYTES, assemble, partition
from .sentence import compose, decompose
from .types import TokenLike

log = logging.getLogger(__name__)


def _token_bytes(token: TokenLike) -> bytes:
    """Normalise a caller-supplied token to its 16 raw bytes."""
    if isinstance(token, uuid.UUID):
        return token.bytes
    if isinstance(token, (bytes, bytearray)):
        if len(token) != TOKEN_BYTES:
            raise TokenError(f"token must be {TOKEN_BYTES} bytes", token=bytes(token))
        return bytes(token)
    if isinstance(token, str):
        try:
            return uuid.UUID(token).bytes
        except ValueError:
            raise TokenError("token is not a valid UUID string", token=token)
    raise TokenError("token must be a UUID, bytes or str", token=token)


def _new_token() -> uuid.UUID:
    """Fresh random token for the generate/short calls."""
    return uuid.uuid4()


def encode(token: TokenLike, profile: "ProfileName | Profile" = "normal") -> str:
    """
    Derive a sentence from a token.

    :param token: UUID, 16 raw bytes, or a UUID string.
    :param profile: Profile name or instance.
    :raises TokenError: If the token is not a 128-bit value.
    :raises ProfileError: If the profile name is unknown.
    """
    prof = get_profile(profile)
    values = partition(prof.widths, _token_bytes(token))
    return compose(prof, values)


def decode(
    sentence: str,
    profile: "ProfileName | Profile" = "normal",
    strict: bool | None = None,
) -> uuid.UUID:
    """
    Recover the token a sentence was derived from.

    :param sentence: Sentence produced by :func:`encode` with the same profile.
    :param profile: Profile name or instance; must cover all 128 bits.
    :param strict: Also check connective words; ``None`` uses the global setting.
    :raises ProfileError: If the profile is unknown or drops token bits.
    :raises DecodeError: If the sentence cannot be read.
    """
    prof = get_profile(profile)
    if not prof.invertible:
        raise ProfileError(
            f"profile {prof.name!r} uses {prof.bit_length} of 128 bits and cannot be decoded"
        )
    values = decompose(prof, sentence, strict=strict)
    return uuid.UUID(bytes=assemble(prof.widths, values))


def generate() -> str:
    """
    Create a long sentence from a new random UUID.

    Example: ``Drelda Stova Malon the stormkeeper of Ashford sang Bala Kira Vonne and 8 large ducks``
    """
    return encode(_new_token(), "normal")


def generate_from(token: TokenLike) -> str:
    """Derive a long sentence from a UUID."""
    return encode(token, "normal")


def generate_inverse(sentence: str, strict: bool | None = None) -> uuid.UUID:
    """
    Get the original UUID back from a long sentence.

    :raises DecodeError: If the sentence was not produced by :func:`generate`.
    """
    return decode(sentence, "normal", strict=strict)


def short() -> str:
    """
    Create a short sentence from a new random UUID.

    Example: ``Bala jumped by 60 narrow chickens``
    """
    return encode(_new_token(), "short")


def short_from(token: TokenLike) -> str:
    """Derive a short sentence from the leading 32 bits of a UUID."""
    return encode(token, "short")


__all__ = [
    "encode",
    "decode",
    "generate",
    "generate_from",
    "generate_inverse",
    "short",
    "short_from",
]

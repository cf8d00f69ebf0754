"""
Split a token's bits into fixed-width unsigned integers and join them back.
"""

from collections.abc import Sequence
from typing import Final

from ._bits import bits_to_int, int_to_bits, to_bits, to_bytes
from .errors import ContractViolation
from .types import Bits, SegmentValue

TOKEN_BYTES: Final[int] = 16
TOKEN_BITS: Final[int] = TOKEN_BYTES * 8


def partition(widths: Sequence[int], token: bytes) -> list[SegmentValue]:
    """
    Read one unsigned integer per width from the front of the token's bits.

    When the widths cover fewer than all 128 bits, the trailing bits are
    ignored and have no effect on the result.

    :param widths: Bit width of each segment, in order.
    :param token: The 16-byte token.
    :returns: ``len(widths)`` integers, each below ``2**width``.
    """
    if len(token) != TOKEN_BYTES:
        raise ContractViolation(f"token must be {TOKEN_BYTES} bytes, got {len(token)}")
    if sum(widths) > TOKEN_BITS:
        raise ContractViolation(f"widths sum to {sum(widths)} bits, token has {TOKEN_BITS}")

    bits = to_bits(token)
    values: list[SegmentValue] = []
    cursor = 0
    for width in widths:
        values.append(bits_to_int(bits[cursor : cursor + width]))
        cursor += width
    return values


def assemble(widths: Sequence[int], values: Sequence[SegmentValue]) -> bytes:
    """
    Rebuild the token from its segment values.

    Only defined when the widths cover the whole token.

    :param widths: Bit width of each segment, in order.
    :param values: Segment values in the same order as ``widths``.
    :returns: The 16-byte token.
    """
    if len(widths) != len(values):
        raise ContractViolation(f"{len(values)} values given for {len(widths)} widths")

    bits: Bits = []
    for width, value in zip(widths, values):
        bits.extend(int_to_bits(value, width))

    if len(bits) != TOKEN_BITS:
        raise ContractViolation(f"assembled {len(bits)} bits, expected {TOKEN_BITS}")
    return to_bytes(bits)


__all__ = ["TOKEN_BYTES", "TOKEN_BITS", "partition", "assemble"]

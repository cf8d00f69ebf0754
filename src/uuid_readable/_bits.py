"""
Conversions between byte buffers, flat bit sequences and unsigned integers.

Bits are plain ``0``/``1`` ints, most significant bit first.
"""

from collections.abc import Sequence

from .errors import ContractViolation
from .types import Bits


def to_bits(data: bytes) -> Bits:
    """Expand every byte into 8 bits, MSB first, keeping byte order."""
    bits: Bits = []
    for b in data:
        bits.extend(int_to_bits(b, 8))
    return bits


def to_bytes(bits: Sequence[int]) -> bytes:
    """Pack a bit sequence back into bytes, 8 bits per byte, MSB first."""
    if len(bits) % 8 != 0:
        raise ContractViolation(f"bit count {len(bits)} is not a multiple of 8")
    return bytes(bits_to_int(bits[i : i + 8]) for i in range(0, len(bits), 8))


def bits_to_int(bits: Sequence[int]) -> int:
    """Read a bit run as a big-endian unsigned integer."""
    value = 0
    for bit in bits:
        value = value * 2 + bit
    return value


def int_to_bits(value: int, width: int) -> Bits:
    """Emit exactly ``width`` bits for ``value``, MSB first."""
    if not 0 <= value < (1 << width):
        raise ContractViolation(f"value {value} does not fit in {width} bits")
    return [(value >> shift) & 1 for shift in range(width - 1, -1, -1)]


__all__ = ["to_bits", "to_bytes", "bits_to_int", "int_to_bits"]

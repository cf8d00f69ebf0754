"""Unit tests for bit conversions and segment partitioning."""

import pytest

from uuid_readable._bits import bits_to_int, int_to_bits, to_bits, to_bytes
from uuid_readable.errors import ContractViolation
from uuid_readable.segment import TOKEN_BITS, assemble, partition

SAMPLE = bytes.fromhex("0ee001c712f34b29a4ccf48838b3587a")
NORMAL_WIDTHS = (12, 11, 14, 13, 13, 10, 12, 11, 14, 5, 6, 7)
SHORT_WIDTHS = (6, 6, 7, 8, 5)


# Bit sequencer
# ---------------------------------------------------------------------------


def test_byte_to_bits_msb_first():
    """A single byte expands to 8 bits, most significant first."""
    assert to_bits(bytes([41])) == [0, 0, 1, 0, 1, 0, 0, 1]


def test_bits_to_int_reads_big_endian():
    """Bit runs are read as big-endian unsigned integers."""
    assert bits_to_int([0, 0, 1, 0, 1, 0, 0, 1]) == 41
    assert bits_to_int([]) == 0
    assert bits_to_int([1] * 14) == 16383


def test_token_expands_to_128_bits():
    """A 16-byte token always yields 128 bits in byte order."""
    bits = to_bits(SAMPLE)
    assert len(bits) == TOKEN_BITS
    assert bits[:8] == [0, 0, 0, 0, 1, 1, 1, 0]  # 0x0e


def test_to_bytes_inverts_to_bits():
    """Packing the expanded bits returns the original bytes."""
    assert to_bytes(to_bits(SAMPLE)) == SAMPLE


def test_to_bytes_rejects_partial_byte():
    """Bit counts that are not a multiple of 8 are a contract violation."""
    with pytest.raises(ContractViolation):
        to_bytes([1, 0, 1])


def test_int_to_bits_pads_to_width():
    """Small values are left-padded with zeros to the requested width."""
    assert int_to_bits(5, 6) == [0, 0, 0, 1, 0, 1]
    assert int_to_bits(0, 3) == [0, 0, 0]
    assert int_to_bits(7, 3) == [1, 1, 1]


def test_int_to_bits_rejects_overflow():
    """A value that needs more bits than the width is a contract violation."""
    with pytest.raises(ContractViolation):
        int_to_bits(8, 3)
    with pytest.raises(ContractViolation):
        int_to_bits(-1, 3)


# Partition / assemble
# ---------------------------------------------------------------------------


def test_partition_normal_widths():
    """Segment values match a hand-computed split of the sample token."""
    assert partition(NORMAL_WIDTHS, SAMPLE) == [
        238, 0, 14562, 3021, 1428, 841, 2462, 1160, 3628, 26, 48, 122,
    ]


def test_partition_short_widths_uses_leading_bits():
    """Short widths consume only the leading 32 bits."""
    assert partition(SHORT_WIDTHS, SAMPLE) == [3, 46, 0, 14, 7]

    # only the first four bytes matter
    altered = SAMPLE[:4] + bytes(12)
    assert partition(SHORT_WIDTHS, altered) == [3, 46, 0, 14, 7]


def test_partition_extremes():
    """All-zero and all-one tokens map to the smallest and largest values."""
    assert partition(NORMAL_WIDTHS, bytes(16)) == [0] * 12
    assert partition(NORMAL_WIDTHS, b"\xff" * 16) == [(1 << w) - 1 for w in NORMAL_WIDTHS]


def test_assemble_inverts_partition():
    """Assembling the partitioned values recovers the token."""
    for token in (SAMPLE, bytes(16), b"\xff" * 16):
        assert assemble(NORMAL_WIDTHS, partition(NORMAL_WIDTHS, token)) == token


def test_assemble_requires_full_token_width():
    """Widths covering fewer than 128 bits cannot be assembled."""
    with pytest.raises(ContractViolation):
        assemble(SHORT_WIDTHS, partition(SHORT_WIDTHS, SAMPLE))


def test_assemble_rejects_value_overflow():
    """A value outside its width is a contract violation."""
    values = partition(NORMAL_WIDTHS, SAMPLE)
    values[9] = 32  # 5-bit slot
    with pytest.raises(ContractViolation):
        assemble(NORMAL_WIDTHS, values)


def test_assemble_rejects_count_mismatch():
    """Values and widths must pair up one to one."""
    with pytest.raises(ContractViolation):
        assemble(NORMAL_WIDTHS, [0] * 11)


def test_partition_rejects_oversized_widths():
    """Widths summing past 128 bits are a contract violation."""
    with pytest.raises(ContractViolation):
        partition((64, 64, 1), SAMPLE)


def test_partition_rejects_wrong_token_size():
    """Tokens must be exactly 16 bytes."""
    with pytest.raises(ContractViolation):
        partition(SHORT_WIDTHS, bytes(4))

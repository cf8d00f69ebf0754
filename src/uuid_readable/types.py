"""
Core types for the sentence codec.
"""

import uuid
from typing import TypeAlias

Bit: TypeAlias = int
Bits: TypeAlias = list[Bit]
SegmentValue: TypeAlias = int
Widths: TypeAlias = tuple[int, ...]
TokenLike: TypeAlias = uuid.UUID | bytes | str

"""
George Marsaglia's multiply-with-carry (MWC) pseudo-random generator.

Good enough for producing values to sort; not for anything else. Two 32-bit
lag-1 MWC streams are combined into one 32-bit output, and two outputs into a
signed 64-bit value.

Public API (stable):
    MWCGenerator(m_z, m_w)
    MWCGenerator.from_seed(seed) / MWCGenerator.from_time()
    gen.next32() -> int in [0, 2**32)
    gen.next64() -> int in [-2**63, 2**63)
    gen.integers(n) -> list[int]
"""

from __future__ import annotations

import time
from typing import FrozenSet, List

__all__ = ["MWCGenerator"]

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF

_Z_MULT = 36969
_W_MULT = 18000

def _stuck_words(mult: int) -> FrozenSet[int]:
    """
    Words whose stream x -> mult*(x & 0xFFFF) + (x >> 16) is constant.

    The fixed points are 0 and ((mult - 1) << 16) | 0xFFFF. The fixed point
    also has preimages with lower half 0xFFFF - k and upper half
    (mult - 1) + mult*k while that fits in 16 bits; those upper halves exceed
    anything the recurrence produces, so they are only reachable as seeds.
    """
    words = {0}
    k = 0
    while True:
        hi = (mult - 1) + mult * k
        if hi > _MASK16:
            break
        words.add((hi << 16) | (_MASK16 - k))
        k += 1
    return frozenset(words)


_Z_STUCK = _stuck_words(_Z_MULT)
_W_STUCK = _stuck_words(_W_MULT)

# Marsaglia's published default seeds
_Z_DEFAULT = 362436069
_W_DEFAULT = 521288629


class MWCGenerator:
    def __init__(self, m_z: int, m_w: int) -> None:
        self.m_z = m_z & _MASK32
        self.m_w = m_w & _MASK32
        if self.m_z in _Z_STUCK or self.m_w in _W_STUCK:
            raise ValueError(
                f"MWC state ({self.m_z:#010x}, {self.m_w:#010x}) is a fixed point of the recurrence"
            )

    @classmethod
    def from_seed(cls, seed: int) -> "MWCGenerator":
        """Derive both state words from one 32-bit seed."""
        m_z = seed & _MASK32
        m_w = _MASK32 ^ m_z
        m_w = ((m_z << 16) | (m_w >> 16)) & _MASK32
        # a handful of seeds land a word on a fixed point
        if m_z in _Z_STUCK:
            m_z = _Z_DEFAULT
        if m_w in _W_STUCK:
            m_w = _W_DEFAULT
        return cls(m_z, m_w)

    @classmethod
    def from_time(cls) -> "MWCGenerator":
        return cls.from_seed(int(time.time()))

    def next32(self) -> int:
        self.m_z = _Z_MULT * (self.m_z & _MASK16) + (self.m_z >> 16)
        self.m_w = _W_MULT * (self.m_w & _MASK16) + (self.m_w >> 16)
        return ((self.m_z << 16) + (self.m_w & _MASK16)) & _MASK32

    def next64(self) -> int:
        value = (self.next32() << 32) | self.next32()
        if value >= 1 << 63:
            value -= 1 << 64
        return value

    def integers(self, n: int) -> List[int]:
        return [self.next64() for _ in range(n)]

    def __repr__(self) -> str:
        return f"MWCGenerator(m_z={self.m_z:#010x}, m_w={self.m_w:#010x})"

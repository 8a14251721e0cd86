"""xmur3 string hash used to expand a text seed into 32-bit seed words.

See https://github.com/bryc/code/blob/master/jshash/PRNGs.md
"""

from typing import List

from .bits import imul32, rotl32, u32, utf16_units

XMUR3_BASIS = 1779033703
XMUR3_PRIME = 3432918353
FMIX_PRIME_1 = 2246822507
FMIX_PRIME_2 = 3266489909


class Xmur3:
    """One-shot seed expander; each call yields the next mixed 32-bit word."""

    __slots__ = ("_h",)

    def __init__(self, seed: str) -> None:
        units = utf16_units(seed)
        h = u32(XMUR3_BASIS ^ len(units))
        for unit in units:
            h = imul32(h ^ unit, XMUR3_PRIME)
            h = rotl32(h, 13)
        self._h = h

    def next_u32(self) -> int:
        h = self._h
        h = imul32(h ^ (h >> 16), FMIX_PRIME_1)
        h = imul32(h ^ (h >> 13), FMIX_PRIME_2)
        h ^= h >> 16
        self._h = h
        return h

    __call__ = next_u32

    def words(self, count: int) -> List[int]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.next_u32() for _ in range(count)]

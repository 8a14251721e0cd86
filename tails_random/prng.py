# Small Fast Chaotic (sfc32) PRNG seeded through xmur3 (no external deps)
# Source: https://github.com/bryc/code/blob/master/jshash/PRNGs.md
from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

from .bits import add32, rotl32, u32
from .seeding import Xmur3

T = TypeVar("T")


@dataclass
class Sfc32:
    a: int
    b: int
    c: int
    d: int

    def __post_init__(self) -> None:
        self.a, self.b, self.c, self.d = u32(self.a), u32(self.b), u32(self.c), u32(self.d)

    @property
    def state(self) -> Tuple[int, int, int, int]:
        return self.a, self.b, self.c, self.d

    def next_u32(self) -> int:
        a, b, c, d = self.a, self.b, self.c, self.d
        t = add32(a, b, d)
        self.d = add32(d, 1)
        self.a = b ^ (b >> 9)
        self.b = add32(c, c << 3)
        self.c = add32(rotl32(c, 21), t)
        return t

    def random(self) -> float:
        return self.next_u32() / 4294967296.0

    __call__ = random

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b
        if b < a:
            raise ValueError(f"empty range for randint({a}, {b})")
        span = b - a + 1
        return a + int(self.random() * span)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]


def create_prng(seed: str) -> Sfc32:
    """Build an sfc32 generator from the first four xmur3 words of ``seed``."""
    expander = Xmur3(seed)
    return Sfc32(expander(), expander(), expander(), expander())

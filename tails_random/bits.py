"""32-bit wraparound primitives shared by the seed expander and the generator."""

from typing import List

MASK32 = 0xFFFFFFFF


def u32(value: int) -> int:
    """Reduce any integer to its unsigned 32-bit value."""
    return value & MASK32


def add32(*values: int) -> int:
    """Sum with modulo 2**32 wraparound."""
    return sum(values) & MASK32


def imul32(a: int, b: int) -> int:
    """Low 32 bits of the product, like C's uint32 multiply."""
    return (a * b) & MASK32


def rotl32(value: int, shift: int) -> int:
    """Rotate a 32-bit word left by ``shift`` bits."""
    value &= MASK32
    shift &= 31
    return ((value << shift) | (value >> (32 - shift))) & MASK32


def utf16_units(text: str) -> List[int]:
    """Split text into UTF-16 code units.

    Characters outside the BMP become a surrogate pair, so seed strings hash
    the same way they do in UTF-16 based runtimes.
    """
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]

# PCG generators for reproducible sampling (no external deps)
# XSH-RS output permutation, two 32-bit halves paired into 64-bit words
from dataclasses import dataclass
from typing import Protocol, Tuple

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1
MULTIPLIER = 6364136223846793005
DEFAULT_STREAM = 0xDA3E39CB94B95BDB  # shared by both halves before decorrelation


class WordSource(Protocol):
    """Anything that yields unsigned 64-bit words."""

    def next_u64(self) -> int:
        ...


@dataclass
class PCG32:
    """Single-stream PCG-XSH-RS generator.

    ``state`` is the initial seed on construction; after ``__post_init__`` it
    holds the live LCG state. ``stream`` is stored force-odd.
    """

    state: int
    stream: int = 0

    def __post_init__(self) -> None:
        seed = self.state & MASK64
        self.stream = ((self.stream << 1) | 1) & MASK64
        self.state = 0
        self._step()
        self.state = (self.state + seed) & MASK64
        self._step()

    def _step(self) -> None:
        self.state = (self.state * MULTIPLIER + self.stream) & MASK64

    def next_u32(self) -> int:
        current = self.state
        self._step()
        # top 3 bits pick a shift of 22..29
        shift = 22 + (current >> 61)
        return ((current ^ (current >> 22)) >> shift) & MASK32


def _paired(low_seed: int, high_seed: int, seq1: int, seq2: int) -> Tuple[PCG32, PCG32]:
    mask = MASK64 >> 1
    seq1 &= MASK64
    seq2 &= MASK64
    if seq1 & mask == seq2 & mask:
        seq2 ^= MASK64
    return PCG32(low_seed, seq1), PCG32(high_seed, seq2)


class PCG64:
    """Two PCG32 halves concatenated into one 64-bit word per draw."""

    def __init__(self, seed: int, seq: int = DEFAULT_STREAM) -> None:
        self.low, self.high = _paired(seed, seed, seq, seq)

    @classmethod
    def from_parts(cls, low_seed: int, high_seed: int, seq1: int, seq2: int) -> "PCG64":
        rng = cls.__new__(cls)
        rng.low, rng.high = _paired(low_seed, high_seed, seq1, seq2)
        return rng

    def next_u64(self) -> int:
        return (self.low.next_u32() << 32) | self.high.next_u32()

    def __repr__(self) -> str:
        return f"PCG64(low={self.low!r}, high={self.high!r})"

import time
from dataclasses import dataclass
from typing import List, MutableSequence, Tuple, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5
TWO_32 = 4294967296  # 2^32, divisor mapping a u32 onto [0, 1)

def u32(v: int) -> int:
    return v & MASK32

def mb_step(state: int) -> Tuple[int, float]:
    """
    One Mulberry32 draw. Returns (new_state, value) with value in [0, 1).
    Every intermediate is masked back to 32 bits so the stream matches the
    wrapping unsigned arithmetic bit for bit.
    """
    state = u32(state + INCREMENT)
    t = state
    t = u32((t ^ (t >> 15)) * (t | 1))
    t = u32(t ^ u32(t + u32((t ^ (t >> 7)) * (t | 61))))
    return state, u32(t ^ (t >> 14)) / TWO_32

def seed_from_time() -> int:
    # Milliseconds since the epoch, the seed used when the caller gives none.
    return int(time.time() * 1000)

@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state = u32(self.state)

    def reseed(self, seed: int) -> None:
        self.state = u32(seed)

    def next_float(self) -> float:
        self.state, value = mb_step(self.state)
        return value

    def random_int(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi): floor(draw * (hi - lo)) + lo."""
        if hi <= lo:
            raise ValueError(f"empty range [{lo}, {hi})")
        return int(self.next_float() * (hi - lo)) + lo

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        # Fisher–Yates from the last index down; one draw per swap slot.
        for i in range(len(items) - 1, 0, -1):
            j = self.random_int(0, i + 1)
            items[i], items[j] = items[j], items[i]
        return items

def draws(seed: int, n: int) -> List[float]:
    """First n values of the stream for seed."""
    rng = Mulberry32(seed)
    return [rng.next_float() for _ in range(n)]

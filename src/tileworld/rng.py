from __future__ import annotations

_MASK = 0xFFFFFFFF


class Lcg:
    """32-bit linear congruential generator; same seed, same float stream."""

    MULTIPLIER = 1664525
    INCREMENT = 1013904223

    def __init__(self, seed: int):
        self.state = seed & _MASK

    def next_float(self) -> float:
        self.state = (self.state * self.MULTIPLIER + self.INCREMENT) & _MASK
        return self.state / 4294967296

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.next_float()


def mix_seed(wx: int, wy: int, block_id: int) -> int:
    return (((wx & 0xFFFF) << 16) ^ (wy & 0xFFFF) ^ ((int(block_id) * 2654435761) & _MASK)) & _MASK

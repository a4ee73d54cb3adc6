from __future__ import annotations

import math

import numpy as np


def smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


class NoiseField:
    """1D value noise over a fixed table of uniform samples.

    ``value_at(x)`` blends the two table entries around ``x`` with a
    smoothstep weight, so the output is continuous and never leaves the
    range spanned by the table. Indices wrap around the table length.
    """

    def __init__(self, table):
        self.table = np.asarray(table, dtype=np.float64)
        if self.table.ndim != 1 or self.table.size == 0:
            raise ValueError("noise table must be a non-empty 1D sequence")

    @classmethod
    def random(cls, size: int, rng: np.random.Generator | None = None) -> "NoiseField":
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.random(size))

    def __len__(self) -> int:
        return int(self.table.size)

    def value_at(self, x: float) -> float:
        xi = math.floor(x)
        xf = x - xi
        n = self.table.size
        a = float(self.table[xi % n])
        b = float(self.table[(xi + 1) % n])
        t = smoothstep(xf)
        return a * (1 - t) + b * t

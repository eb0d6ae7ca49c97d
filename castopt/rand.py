"""Subtractive lagged-Fibonacci random number generator used by the optimiser."""

from __future__ import annotations

_TABLE_SIZE = 55


class RandomGenerator:
    """Knuth-style subtractive generator seeded with a value in (0, 1)."""

    def __init__(self, seed: float) -> None:
        self.seed = float(seed)
        self.oldrand: list[float] = [0.0] * _TABLE_SIZE
        self.jrand = 0
        self.randomize()

    def randomize(self) -> None:
        """Reset the table and warm it up from the stored seed."""
        self.oldrand = [0.0] * _TABLE_SIZE
        self.jrand = 0
        self.warmup_random(self.seed)

    def warmup_random(self, seed: float) -> None:
        """Fill the table from ``seed`` and discard the first batches."""
        self.oldrand[54] = seed
        new_random = 0.000000001
        prev_random = seed
        for j1 in range(1, 55):
            ii = (21 * j1) % 54
            self.oldrand[ii] = new_random
            new_random = prev_random - new_random
            if new_random < 0.0:
                new_random += 1.0
            prev_random = self.oldrand[ii]
        for _ in range(3):
            self.advance_random()
        self.jrand = 0

    def advance_random(self) -> None:
        """Produce the next batch of 55 numbers in the table."""
        table = self.oldrand
        for j1 in range(24):
            value = table[j1] - table[j1 + 31]
            if value < 0.0:
                value += 1.0
            table[j1] = value
        for j1 in range(24, _TABLE_SIZE):
            value = table[j1] - table[j1 - 24]
            if value < 0.0:
                value += 1.0
            table[j1] = value

    def randomperc(self) -> float:
        """Return a number in [0, 1)."""
        self.jrand += 1
        if self.jrand >= _TABLE_SIZE:
            self.jrand = 1
            self.advance_random()
        return self.oldrand[self.jrand]

    def rnd(self, low: int, high: int) -> int:
        """Return an integer in [low, high]; ``low`` when the range is empty."""
        if low >= high:
            return low
        result = int(low + self.randomperc() * (high - low + 1))
        return min(result, high)

    def rndreal(self, low: float, high: float) -> float:
        """Return a real number between ``low`` and ``high``."""
        return low + (high - low) * self.randomperc()
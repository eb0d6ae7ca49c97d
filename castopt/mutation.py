"""Polynomial mutation for real variables and bit-flip mutation for binary ones."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from castopt.individual import Individual
from castopt.rand import RandomGenerator


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan


class PolynomialMutation:
    """Mutation operator that also counts the mutations it performs."""

    def __init__(
        self,
        rng: RandomGenerator,
        min_realvar: Sequence[float],
        max_realvar: Sequence[float],
        eta_m: float,
        pmut_real: float,
        pmut_bin: float = 0.0,
    ) -> None:
        self.rng = rng
        self.min_realvar = list(min_realvar)
        self.max_realvar = list(max_realvar)
        self.eta_m = eta_m
        self.pmut_real = pmut_real
        self.pmut_bin = pmut_bin
        self.nrealmut = 0
        self.nbinmut = 0

    def mutate_population(self, pop: Iterable[Individual]) -> None:
        """Mutate every individual of ``pop`` in place."""
        for ind in pop:
            self.mutate(ind)

    def mutate(self, ind: Individual) -> None:
        """Mutate the real and binary parts of ``ind`` in place."""
        if ind.xreal:
            self.real_mutate(ind)
        if ind.gene:
            self.bin_mutate(ind)

    def bin_mutate(self, ind: Individual) -> None:
        """Flip each bit with probability ``pmut_bin``."""
        for bits in ind.gene:
            for k, bit in enumerate(bits):
                if self.rng.randomperc() <= self.pmut_bin:
                    bits[k] = 0 if bit == 1 else 1
                    self.nbinmut += 1

    def real_mutate(self, ind: Individual) -> None:
        """Apply polynomial mutation to each real variable with probability ``pmut_real``."""
        rng = self.rng
        exponent = self.eta_m + 1.0
        mut_pow = 1.0 / exponent
        for j, (y, yl, yu) in enumerate(zip(ind.xreal, self.min_realvar, self.max_realvar)):
            if rng.randomperc() > self.pmut_real:
                continue
            span = yu - yl
            delta1 = (y - yl) / span
            delta2 = (yu - y) / span
            r = rng.randomperc()
            if r <= 0.5:
                xy = 1.0 - delta1
                val = 2.0 * r + (1.0 - 2.0 * r) * _pow(xy, exponent)
                deltaq = _pow(val, mut_pow) - 1.0
            else:
                xy = 1.0 - delta2
                val = 2.0 * (1.0 - r) + 2.0 * (r - 0.5) * _pow(xy, exponent)
                deltaq = 1.0 - _pow(val, mut_pow)
            y = y + deltaq * span
            if y < yl:
                y = yl
            if y > yu:
                y = yu
            ind.xreal[j] = y
            self.nrealmut += 1
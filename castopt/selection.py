"""Binary tournament selection followed by crossover."""

from __future__ import annotations

from typing import Callable, Sequence

from castopt.individual import Individual
from castopt.rand import RandomGenerator

Crossover = Callable[[Individual, Individual], "tuple[Individual, Individual]"]


def _coin(ind1: Individual, ind2: Individual, rng: RandomGenerator) -> Individual:
    return ind1 if rng.randomperc() <= 0.5 else ind2


def tournament(
    ind1: Individual,
    ind2: Individual,
    rng: RandomGenerator,
    constrained: bool = True,
) -> Individual:
    """Return the winner of a binary tournament between ``ind1`` and ``ind2``.

    With constraints, a feasible individual (violation >= 0) beats an infeasible
    one and among infeasible ones the smaller violation wins; ties are random.
    """
    if not constrained:
        return _coin(ind1, ind2, rng)
    v1 = ind1.constr_violation
    v2 = ind2.constr_violation
    if v1 < 0 and v2 < 0:
        if v1 < v2:
            return ind2
        if v1 > v2:
            return ind1
        return _coin(ind1, ind2, rng)
    if v1 >= 0 and v2 < 0:
        return ind1
    if v1 < 0 and v2 >= 0:
        return ind2
    return _coin(ind1, ind2, rng)


def _shuffled_pair(size: int, rng: RandomGenerator) -> tuple[list[int], list[int]]:
    a1 = list(range(size))
    a2 = list(range(size))
    for i in range(size):
        pick = rng.rnd(i, size - 1)
        a1[pick], a1[i] = a1[i], a1[pick]
        pick = rng.rnd(i, size - 1)
        a2[pick], a2[i] = a2[i], a2[pick]
    return a1, a2


def selection(
    old_pop: Sequence[Individual],
    rng: RandomGenerator,
    crossover: Crossover,
    constrained: bool = True,
) -> list[Individual]:
    """Build a child population by tournament selection and ``crossover``.

    ``crossover(parent1, parent2)`` returns two children. The population size
    must be a positive multiple of four.
    """
    size = len(old_pop)
    if size < 4 or size % 4 != 0:
        raise ValueError(f"population size must be a positive multiple of 4, got {size}")
    a1, a2 = _shuffled_pair(size, rng)
    new_pop: list[Individual] = []
    for i in range(0, size, 4):
        for order in (a1, a2):
            parent1 = tournament(old_pop[order[i]], old_pop[order[i + 1]], rng, constrained)
            parent2 = tournament(old_pop[order[i + 2]], old_pop[order[i + 3]], rng, constrained)
            child1, child2 = crossover(parent1, parent2)
            new_pop.extend((child1, child2))
    return new_pop
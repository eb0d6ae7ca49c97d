"""Individuals of the evolving population and population merging."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from typing import Iterable, Sequence


@dataclass
class Individual:
    """One candidate solution with its objectives and constraints."""

    xreal: list[float] = field(default_factory=list)
    obj: list[float] = field(default_factory=list)
    constr: list[float] = field(default_factory=list)
    gene: list[list[int]] = field(default_factory=list)
    xbin: list[float] = field(default_factory=list)
    rank: int = 0
    constr_violation: float = 0.0
    crowd_dist: float = 0.0

    @classmethod
    def empty(
        cls, nreal: int, nobj: int, ncon: int, nbits: Iterable[int] = ()
    ) -> "Individual":
        """Create a zeroed individual of the given dimensions."""
        bits = list(nbits)
        return cls(
            xreal=[0.0] * nreal,
            obj=[0.0] * nobj,
            constr=[0.0] * ncon,
            gene=[[0] * n for n in bits],
            xbin=[0.0] * len(bits),
        )

    def copy(self) -> "Individual":
        """Return an independent copy."""
        return _copy.deepcopy(self)


def copy_ind(source: Individual, target: Individual) -> None:
    """Copy rank, violation, variables, objectives and constraints into ``target``."""
    target.rank = source.rank
    target.constr_violation = source.constr_violation
    target.xreal = list(source.xreal)
    target.xbin = list(source.xbin)
    target.gene = [list(bits) for bits in source.gene]
    target.obj = list(source.obj)
    target.constr = list(source.constr)


def merge(pop1: Sequence[Individual], pop2: Sequence[Individual]) -> list[Individual]:
    """Return a new population holding copies of ``pop1`` followed by ``pop2``."""
    return [ind.copy() for ind in pop1] + [ind.copy() for ind in pop2]
"""Plain-text reports of a population and of its feasible first front."""

from __future__ import annotations

from typing import Iterable, TextIO

from castopt.individual import Individual


def _genes(ind: Individual) -> str:
    return "".join(f"{bit:d}\t" for bits in ind.gene for bit in bits)


def feasible_front(pop: Iterable[Individual]) -> list[Individual]:
    """Individuals with no constraint violation that lie on the first front."""
    return [ind for ind in pop if ind.constr_violation == 0.0 and ind.rank == 1]


def report_pop(pop: Iterable[Individual], stream: TextIO) -> None:
    """Write objectives, genes, constraint violation and rank, one individual per line."""
    for ind in pop:
        objectives = "".join(f"{value:e}\t" for value in ind.obj)
        stream.write(f"{objectives}{_genes(ind)}{ind.constr_violation:e}\t{ind.rank:d}\n")


def report_feasible(pop: Iterable[Individual], stream: TextIO) -> None:
    """Write objectives, real variables and genes of the feasible first front."""
    for ind in feasible_front(pop):
        objectives = "".join(f"{value:e}\t" for value in ind.obj)
        variables = "".join(f"{value:e}\t" for value in ind.xreal)
        stream.write(f"{objectives}{variables}{_genes(ind)}\n")
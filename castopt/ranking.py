"""Non-dominated rank assignment for a population."""

from __future__ import annotations

from typing import Callable, Sequence

from castopt.individual import Individual

Dominance = Callable[[Individual, Individual], int]


def assign_rank(pop: Sequence[Individual], dominance: Dominance) -> None:
    """Set ``rank`` on every individual of ``pop`` by successive non-dominated fronts.

    ``dominance(a, b)`` returns 1 when ``a`` dominates ``b``, -1 when ``b``
    dominates ``a`` and 0 when neither dominates the other.
    """
    remaining = list(range(len(pop)))
    rank = 1
    while remaining:
        if len(remaining) == 1:
            pop[remaining[0]].rank = rank
            break
        front = [remaining[0]]
        kept_back: list[int] = []
        returned: list[int] = []
        for idx in remaining[1:]:
            candidate = pop[idx]
            survivors: list[int] = []
            dominated = False
            for position, member in enumerate(front):
                flag = dominance(candidate, pop[member])
                if flag == 1:
                    # Members beaten by the candidate go back to the head of the pool.
                    returned.insert(0, member)
                elif flag == -1:
                    dominated = True
                    survivors.extend(front[position:])
                    break
                else:
                    survivors.append(member)
            front = survivors
            if dominated:
                kept_back.append(idx)
            else:
                front.insert(0, idx)
        for member in front:
            pop[member].rank = rank
        remaining = returned + kept_back
        rank += 1
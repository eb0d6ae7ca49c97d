"""Randomised quicksort of population indices."""

from __future__ import annotations

from typing import Callable, MutableSequence, Sequence

from castopt.individual import Individual
from castopt.rand import RandomGenerator


def _quicksort(
    indices: MutableSequence[int],
    key: Callable[[int], float],
    rng: RandomGenerator,
) -> None:
    stack = [(0, len(indices) - 1)]
    while stack:
        left, right = stack.pop()
        if left >= right:
            continue
        pick = rng.rnd(left, right)
        indices[right], indices[pick] = indices[pick], indices[right]
        pivot = key(indices[right])
        i = left - 1
        for j in range(left, right):
            if key(indices[j]) <= pivot:
                i += 1
                indices[j], indices[i] = indices[i], indices[j]
        split = i + 1
        indices[split], indices[right] = indices[right], indices[split]
        # Right range is pushed first so the left range is finished before it.
        stack.append((split + 1, right))
        stack.append((left, split - 1))


def quicksort_front_obj(
    pop: Sequence[Individual],
    objcount: int,
    indices: MutableSequence[int],
    rng: RandomGenerator,
) -> None:
    """Sort ``indices`` in place by objective ``objcount`` of the referenced individuals."""
    _quicksort(indices, lambda idx: pop[idx].obj[objcount], rng)


def quicksort_dist(
    pop: Sequence[Individual],
    indices: MutableSequence[int],
    rng: RandomGenerator,
) -> None:
    """Sort ``indices`` in place by crowding distance of the referenced individuals."""
    _quicksort(indices, lambda idx: pop[idx].crowd_dist, rng)
"""Initial population: random individuals and points injected from a file."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, MutableSequence, Sequence

from castopt.individual import Individual
from castopt.rand import RandomGenerator
from castopt.scenario import Scenario

IndexOf = Callable[[str], int]


@dataclass
class VariableLayout:
    """Where efficiency, land-conversion and animal variables sit in ``xreal``."""

    ef_size: int
    lc_begin: int
    animal_begin: int
    nreal: int
    lc_enabled: bool = False
    animal_enabled: bool = False
    min_realvar: list[float] = field(default_factory=list)
    max_realvar: list[float] = field(default_factory=list)

    @property
    def ef_end(self) -> int:
        """Index of the last efficiency variable."""
        return self.ef_size - 1

    def _bounds(self, j: int) -> tuple[float, float]:
        low = self.min_realvar[j] if j < len(self.min_realvar) else 0.0
        high = self.max_realvar[j] if j < len(self.max_realvar) else 1.0
        return low, high


def _fill_land_conversion(
    xreal: MutableSequence[float],
    layout: VariableLayout,
    scenario: Scenario,
    rng: RandomGenerator,
    seen_parcels: Iterable[str],
) -> None:
    seen = set(seen_parcels)
    idx = layout.lc_begin
    for key in scenario.lc_keys:
        xreal[idx] = 1.0
        idx += 1
        blocked = key in seen
        for _ in scenario.land_conversion_to[key]:
            xreal[idx] = 0.0 if blocked else rng.rndreal(0.0, 0.05)
            idx += 1


def _fill_animal(
    xreal: MutableSequence[float],
    layout: VariableLayout,
    scenario: Scenario,
    rng: RandomGenerator,
) -> None:
    idx = layout.animal_begin
    for key in scenario.animal_keys:
        xreal[idx] = 1.0
        idx += 1
        for _ in scenario.animal_complete[key]:
            xreal[idx] = rng.rndreal(0.0, 0.05)
            idx += 1


def _entries(solution: Any) -> Iterable[dict]:
    if isinstance(solution, dict):
        return solution.values()
    return solution


def read_injected_points(
    path: str | Path,
    layout: VariableLayout,
    scenario: Scenario | None,
    index_of: IndexOf,
    rng: RandomGenerator,
) -> tuple[list[list[float]], list[str]]:
    """Read injected solutions from a JSON file.

    Returns the decision vectors and the ``s_h_u`` parcels they touch, in the
    order first seen. A missing file gives no points.
    """
    path = Path(path)
    if not path.exists():
        return [], []
    with open(path, encoding="utf-8") as handle:
        solutions = json.load(handle)

    seen: list[str] = []
    points: list[list[float]] = []
    for solution in solutions:
        xreal = [0.0] * layout.nreal
        for entry in _entries(solution):
            s, h, u = entry["location"][:3]
            parcel = f"{s}_{h}_{u}"
            if parcel not in seen:
                seen.append(parcel)
            key = f"{s}_{h}_{u}_{entry['bmp']}"
            idx = index_of(key)
            if idx < 0:
                raise ValueError(f"no variable for {key} in the problem")
            if idx >= layout.nreal:
                raise ValueError(f"variable index {idx} for {key} is out of bounds")
            xreal[idx] = float(entry["amount"])

        if scenario is not None and layout.lc_enabled:
            # Injected points always receive fresh land-conversion shares.
            _fill_land_conversion(xreal, layout, scenario, rng, ())
        if scenario is not None and layout.animal_enabled:
            _fill_animal(xreal, layout, scenario, rng)
        points.append(xreal)
    return points, seen


def initialize_ind(
    ind: Individual,
    layout: VariableLayout,
    scenario: Scenario | None,
    rng: RandomGenerator,
    randomize_efficiency: bool = True,
    seen_parcels: Iterable[str] = (),
) -> None:
    """Initialise ``ind`` in place.

    Efficiency variables are drawn at random only when ``randomize_efficiency``
    is set; land-conversion shares of parcels in ``seen_parcels`` are zeroed.
    """
    if ind.xreal:
        if randomize_efficiency:
            for j in range(layout.ef_end):
                low, high = layout._bounds(j)
                ind.xreal[j] = rng.rndreal(low, high)
        if scenario is not None and layout.lc_enabled:
            _fill_land_conversion(ind.xreal, layout, scenario, rng, seen_parcels)
        if scenario is not None and layout.animal_enabled:
            _fill_animal(ind.xreal, layout, scenario, rng)

    for bits in ind.gene:
        for k in range(len(bits)):
            bits[k] = 0 if rng.randomperc() <= 0.5 else 1


def initialize_pop(
    pop: Sequence[Individual],
    injected: Sequence[Sequence[float]],
    layout: VariableLayout,
    scenario: Scenario | None,
    rng: RandomGenerator,
    seen_parcels: Iterable[str] = (),
) -> int:
    """Initialise ``pop`` in place from injected points and random individuals.

    The first individuals take the injected points; each remaining one starts
    from a randomly chosen injected point (if any) and is then initialised.
    Returns the number of injected points.
    """
    seen = list(seen_parcels)
    n_injected = len(injected)
    for ind, point in zip(pop, injected):
        ind.xreal[: layout.nreal] = list(point[: layout.nreal])
    for ind in pop[n_injected:]:
        if n_injected:
            source = injected[random.randrange(n_injected)]
            ind.xreal[: layout.nreal] = list(source[: layout.nreal])
        initialize_ind(ind, layout, scenario, rng, n_injected == 0, seen)
    return n_injected
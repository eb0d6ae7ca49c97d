"""Land-conversion and animal decision variables of a watershed scenario."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

_COST_PROFILE = 8


def _accumulate(table: dict[str, float], key: str, value: float) -> None:
    table[key] = table.get(key, 0.0) + value


def _share(part: float, total: float) -> float:
    if total == 0:
        return part / total if part else math.nan
    return part / total


@dataclass
class Scenario:
    """Scenario data plus the allocations derived from a decision vector."""

    amount: dict[str, float] = field(default_factory=dict)
    land_conversion_to: dict[str, list[str]] = field(default_factory=dict)
    bmp_cost: dict[str, float] = field(default_factory=dict)
    animal_complete: dict[str, list[int]] = field(default_factory=dict)
    animal_unit: dict[str, float] = field(default_factory=dict)
    lc_keys: list[str] = field(init=False)
    animal_keys: list[str] = field(init=False)
    amount_minus: dict[str, float] = field(init=False, default_factory=dict)
    amount_plus: dict[str, float] = field(init=False, default_factory=dict)
    lc_x: list[tuple[int, int, int, int, float]] = field(init=False, default_factory=list)
    animal_x: list[tuple[int, int, int, int, int, float]] = field(
        init=False, default_factory=list
    )

    def __post_init__(self) -> None:
        self.lc_keys = sorted(self.land_conversion_to)
        self.animal_keys = sorted(self.animal_complete)

    @classmethod
    def load(cls, path: str | Path) -> "Scenario":
        """Read a scenario from its JSON description."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        return cls(
            amount={k: float(v) for k, v in data["amount"].items()},
            land_conversion_to={k: [str(b) for b in v] for k, v in data["land_conversion_to"].items()},
            bmp_cost={k: float(v) for k, v in data["bmp_cost"].items()},
            animal_complete={k: [int(b) for b in v] for k, v in data["animal_complete"].items()},
            animal_unit={k: float(v) for k, v in data["animal_unit"].items()},
        )

    def lc_size(self) -> int:
        """Number of land-conversion variables: one per parcel plus one per target."""
        return sum(1 + len(group) for group in self.land_conversion_to.values())

    def animal_size(self) -> int:
        """Number of animal variables: one per group plus one per BMP."""
        return sum(1 + len(group) for group in self.animal_complete.values())

    def alpha_minus(self, key: str, original_amount: float) -> float:
        """Acreage left on parcel ``key`` after land converted away from it."""
        return original_amount - self.amount_minus.get(key, 0.0)

    def alpha_plus_minus(self, key: str, original_amount: float) -> float:
        """Acreage on parcel ``key`` after conversions away from and into it."""
        return self.amount_plus.get(key, 0.0) + self.alpha_minus(key, original_amount)

    def load_alpha(
        self, parcels: Sequence[Sequence[int]], stored_alpha: Sequence[float]
    ) -> list[float]:
        """Adjusted acreage for each ``(s, h, u)`` parcel given its stored acreage."""
        return [
            self.alpha_plus_minus(f"{s}_{h}_{u}", alpha)
            for (s, h, u, *_), alpha in zip(parcels, stored_alpha)
        ]

    def normalize_animal(self, x: Sequence[float], begin: int) -> float:
        """Turn animal variables starting at ``begin`` into allocations; return their cost."""
        counter = begin
        total_cost = 0.0
        self.animal_x = []
        for key in self.animal_keys:
            base_condition, county, load_source, animal_id = key.split("_")[:4]
            total = x[counter]
            counter += 1
            group: list[tuple[float, int]] = []
            for bmp in self.animal_complete[key]:
                group.append((x[counter], bmp))
                total += x[counter]
                counter += 1
            units = self.animal_unit.get(key, 0.0)
            for pct, bmp in group:
                amount = _share(pct, total) * units
                if amount > 1.0:
                    total_cost += amount * self.bmp_cost.get(f"{_COST_PROFILE}_{bmp}", 0.0)
                    self.animal_x.append(
                        (int(base_condition), int(county), int(load_source), int(animal_id), bmp, amount)
                    )
        return total_cost

    def normalize_land_conversion(self, x: Sequence[float], begin: int) -> float:
        """Turn land-conversion variables starting at ``begin`` into allocations; return their cost."""
        counter = begin
        self.amount_minus = {}
        self.amount_plus = {}
        self.lc_x = []
        total_cost = 0.0
        for key in self.lc_keys:
            key_split = key.split("_")
            total = x[counter]
            counter += 1
            group: list[tuple[float, str]] = []
            for target in self.land_conversion_to[key]:
                group.append((x[counter], target))
                total += x[counter]
                counter += 1
            parcel_amount = self.amount.get(key, 0.0)
            pct_accum = 0.0
            for pct, target in group:
                norm_pct = _share(pct, total)
                out_to = target.split("_")
                bmp = int(out_to[0])
                key_to = f"{key_split[0]}_{key_split[1]}_{out_to[1]}"
                converted = norm_pct * parcel_amount
                _accumulate(self.amount_plus, key_to, converted)
                pct_accum += norm_pct
                if converted > 1.0:
                    total_cost += converted * self.bmp_cost.get(f"{_COST_PROFILE}_{bmp}", 0.0)
                    self.lc_x.append(
                        (int(key_split[0]), int(key_split[1]), int(key_split[2]), bmp, converted)
                    )
            _accumulate(self.amount_minus, key, pct_accum * parcel_amount)
        return total_cost
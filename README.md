# castopt

`castopt` is a pure-Python library of building blocks for reference-point
based many-objective evolutionary optimisation in the style of NSGA-III. It
was made for searching cost-effective placements of best management practices
(BMPs) across land parcels, but most of its parts (the random number
generator, reference points, non-dominated ranking, tournament selection,
polynomial mutation and a library of classic benchmark problems) work for any
real-valued problem.

It needs nothing outside the Python standard library (Python 3.10 or later).

## Modules

| Module | Contents |
| --- | --- |
| `castopt.rand` | `RandomGenerator`, a seeded subtractive random number generator. The same seed always gives the same sequence. |
| `castopt.individual` | `Individual` (with `Individual.empty` and `Individual.copy`), `copy_ind` and `merge`. |
| `castopt.reference_points` | Das and Dennis reference points: `nchoosek`, `generate_ref_points`, `create_ref_points`, `read_ref_points`. |
| `castopt.sort` | Randomised quicksorts of population indices: `quicksort_front_obj` (by one objective) and `quicksort_dist` (by crowding distance). |
| `castopt.mutation` | `PolynomialMutation`: polynomial mutation of real variables and bit-flip mutation of binary genes, with mutation counters. |
| `castopt.ranking` | `assign_rank`, non-dominated front ranking with a dominance function you supply. |
| `castopt.selection` | Constraint-aware binary `tournament` and `selection`. |
| `castopt.scenario` | `Scenario`, which turns land-conversion and animal BMP variables into allocations and their cost. |
| `castopt.report` | `report_pop`, `report_feasible` and `feasible_front`. |
| `castopt.settings` | `RunArguments`, `ProblemSettings`, `read_problem_settings`, `write_params`, `write_run_summary` and `ConfigurationError`. |
| `castopt.initialization` | `VariableLayout`, `read_injected_points`, `initialize_ind`, `initialize_pop`. |
| `castopt.workspace` | `CommandResult`, `run_command`, `prepare_output`, `smart_init`, `write_outcome`. |
| `castopt.many_objective` | DTLZ-family and real-world problems (`crash`, `welded_beam`, `car`, `water`, `machining`, `wiper`), each returning a `ProblemResult`. |
| `castopt.two_objective` | SCH, FON, KUR, POL, VNT, ZDT, BNH, OSY, SRN, TNK and CTP problems, each returning a `ProblemResult`. |

## Quick tour

### Reproducible randomness

```python
from castopt.rand import RandomGenerator

rng = RandomGenerator(0.5)
u = rng.randomperc()              # value in [0, 1)
k = rng.rnd(0, 9)                 # integer in [0, 9], bounds included
x = rng.rndreal(-1.0, 1.0)        # real value between -1 and 1
```

### Reference points

```python
from castopt.reference_points import nchoosek, generate_ref_points, create_ref_points

nchoosek(5, 2)                       # 10
points = generate_ref_points(3, 4)   # 3 objectives, 4 divisions: 15 points
```

The coordinates of each point add up to 1. For more than five objectives,
`create_ref_points` shrinks the first layer towards the centre and adds a
second layer built with one more division. `read_ref_points(path, nobj, nref)`
reads preferential points from a whitespace-separated file and normalises each
one to sum to 1.

### Benchmark problems

```python
from castopt.many_objective import dtlz2
from castopt.two_objective import zdt1

result = dtlz2([0.5] * 12, 3)     # 12 variables, 3 objectives
result.obj, result.constr
zdt1([0.0] * 30).obj              # [0.0, 1.0]
```

Problems raise `ValueError` when given too few variables. `zdt5` takes binary
genes (eleven bit lists) instead of real variables.

### Evolution operators

A population is a list of `Individual` objects; `Individual.empty(nreal, nobj,
ncon, nbits)` creates a zeroed one.

* `assign_rank(pop, dominance)` sets `rank` on every individual, 1 for the
  first non-dominated front. `dominance(a, b)` must return 1 if `a` dominates
  `b`, -1 if `b` dominates `a`, and 0 otherwise.
* `selection(old_pop, rng, crossover, constrained)` shuffles the population
  twice, picks parents by binary tournament and passes each pair to your
  `crossover(parent1, parent2)`, which returns two children. The population
  size must be a positive multiple of four. In a constrained tournament an
  individual with `constr_violation >= 0` beats one with a negative value, and
  between two negative values the larger wins; ties are decided at random.
* `PolynomialMutation(rng, min_realvar, max_realvar, eta_m, pmut_real,
  pmut_bin).mutate_population(pop)` mutates in place, keeps each variable
  within its bounds and counts mutations in `nrealmut` and `nbinmut`.
* `merge(pop1, pop2)` returns copies of both populations, one after the other.

### Scenario variables

`Scenario.load(path)` reads a JSON file with the keys `amount`,
`land_conversion_to`, `bmp_cost`, `animal_complete` and `animal_unit`.
`lc_size()` and `animal_size()` give the number of decision variables each
part needs. `normalize_land_conversion(x, begin)` and `normalize_animal(x,
begin)` read those variables from `x` starting at `begin`, fill `lc_x`,
`animal_x`, `amount_plus` and `amount_minus`, and return the total cost.
`load_alpha(parcels, stored_alpha)` then gives each parcel's acreage after the
conversions.

### Initial population

`VariableLayout` records where efficiency, land-conversion and animal
variables sit in `xreal`. `read_injected_points(path, layout, scenario,
index_of, rng)` reads solutions from a JSON file (returning no points if the
file is missing), and `initialize_pop(pop, injected, layout, scenario, rng,
seen_parcels)` places the injected points first and initialises the rest.

### Run settings and files

* `RunArguments.from_argv(argv)` parses the thirteen positional run arguments
  and raises `ConfigurationError` on bad input.
* `read_problem_settings(stream, popsize, lc_variables, animal_variables)`
  reads the whitespace-separated problem description and checks it; only
  problems without binary variables are accepted.
* `write_params` and `write_run_summary` write the parameter report.
* `prepare_output(base_path, emo_uuid)` creates
  `output/nsga3/<uuid>/front`. `smart_init(args, base_path, eps_cnstr_path)`
  runs the external epsilon-constraint solver through the shell when the
  injected-points file is missing, then copies `config/ipopt.json` to
  `front/epsilon.json`. `write_outcome(path, obj)` writes the first two
  objectives with two decimals.
* `report_pop(pop, stream)` writes objectives, genes, constraint violation and
  rank per individual; `report_feasible(pop, stream)` writes objectives, real
  variables and genes of the individuals returned by `feasible_front(pop)`.

## What the package does not do

* There is no command and no driver that runs a whole optimisation: you
  assemble the generation loop from the pieces above.
* It has no crossover operator and no dominance check of its own; both are
  supplied as callables.
* It does not include reference-point niching survival, ideal-point tracking
  or crowding-distance assignment.
* It does not evaluate the watershed model itself: there is no connection to
  an evaluation service or message queue, so BMP solutions must be scored by
  your own function.
* It does no live plotting and writes no columnar (Parquet) files; the display
  choices in the problem settings are only read and checked.

## Testing

The tests use pytest; install the `test` extra and run `pytest`.
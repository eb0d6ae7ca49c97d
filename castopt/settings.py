"""Command-line arguments and problem settings of an optimisation run."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence, TextIO

EVALUATION_OPTIONS = ("corecast", "mathmodel", "corecast+smartinit", "mathmodel+smartinit")

USAGE = (
    "Usage: nsga3r random_seed UUID [corecast | mathmodel | corecast+smartinit | "
    "mathmodel+smartinit] #injected_points injected_points_filename popsize ngen mode "
    "scenario_filename ipopt_reduction ipopt_popsize corecast_gen cost_profile_idx"
)


class ConfigurationError(ValueError):
    """Raised when arguments or problem settings are invalid."""


def _convert(kind, text: str, what: str):
    try:
        return kind(text)
    except ValueError:
        raise ConfigurationError(f"invalid value for {what}: {text!r}") from None


@dataclass
class RunArguments:
    """Arguments given on the command line."""

    seed: float
    emo_uuid: str
    evaluation: str
    n_injected_points: int
    injected_points_filename: str
    popsize: int
    ngen: int
    mode: int
    scenario_filename: str
    ipopt_reduction: float
    ipopt_popsize: int
    corecast_gen: int
    cost_profile_idx: int

    @property
    def smart_init(self) -> bool:
        """Whether the run starts from injected points."""
        return self.evaluation.endswith("+smartinit")

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None) -> "RunArguments":
        """Parse the thirteen positional arguments (program name excluded)."""
        args = list(sys.argv[1:] if argv is None else argv)
        if len(args) < 13:
            raise ConfigurationError(USAGE)
        seed = _convert(float, args[0], "seed")
        evaluation = args[2]
        if evaluation not in EVALUATION_OPTIONS:
            raise ConfigurationError(
                f"invalid option: {evaluation}, please use one of {', '.join(EVALUATION_OPTIONS)}"
            )
        if not 0.0 < seed < 1.0:
            raise ConfigurationError("seed value must be in (0,1)")
        parsed = cls(
            seed=seed,
            emo_uuid=args[1],
            evaluation=evaluation,
            n_injected_points=_convert(int, args[3], "number of injected points"),
            injected_points_filename=args[4],
            popsize=_convert(int, args[5], "population size"),
            ngen=_convert(int, args[6], "number of generations"),
            mode=_convert(int, args[7], "mode"),
            scenario_filename=args[8],
            ipopt_reduction=_convert(float, args[9], "reduction"),
            ipopt_popsize=_convert(int, args[10], "epsilon-constraint population size"),
            corecast_gen=_convert(int, args[11], "corecast generation"),
            cost_profile_idx=_convert(int, args[12], "cost profile"),
        )
        if not parsed.smart_init:
            parsed.n_injected_points = 0
            parsed.injected_points_filename = ""
        return parsed


@dataclass
class ProblemSettings:
    """Problem description read from the input stream."""

    nobj: int
    steps: int
    nref: int
    scaling: float
    adaptive_increment: int
    popsize: int
    ncon: int
    nreal: int
    ef_size: int
    lc_begin: int
    lc_size: int
    animal_begin: int
    animal_size: int
    min_realvar: list[float]
    max_realvar: list[float]
    pcross_real: float
    pmut_real: float
    eta_c: float
    eta_m: float
    nbin: int = 0
    nbits: list[int] = field(default_factory=list)
    min_binvar: list[float] = field(default_factory=list)
    max_binvar: list[float] = field(default_factory=list)
    pcross_bin: float = 0.0
    pmut_bin: float = 0.0
    choice: int = 0
    obj1: int = 0
    obj2: int = 0
    obj3: int = 0
    angle1: int = 0
    angle2: int = 0
    ngen: int = 0

    @property
    def bitlength(self) -> int:
        """Total number of bits over all binary variables."""
        return sum(self.nbits)


class _Tokens:
    def __init__(self, stream: TextIO) -> None:
        self._it: Iterator[str] = iter(stream.read().split())

    def next(self, kind, what: str):
        try:
            token = next(self._it)
        except StopIteration:
            raise ConfigurationError(f"unexpected end of input while reading {what}") from None
        return _convert(kind, token, what)


def _read_axis(tokens: _Tokens, nobj: int, axis: str) -> int:
    value = tokens.next(int, f"{axis} objective")
    if value < 1 or value > nobj:
        raise ConfigurationError(f"wrong value of {axis} objective entered, value entered was {value}")
    return value


def read_problem_settings(
    stream: TextIO, popsize: int, lc_variables: int = 0, animal_variables: int = 0
) -> ProblemSettings:
    """Read the problem description; extra land-conversion and animal variables follow the real ones."""
    tokens = _Tokens(stream)

    nobj = tokens.next(int, "number of objectives")
    if nobj < 1:
        raise ConfigurationError(f"wrong number of objectives entered: {nobj}")

    tokens.next(int, "number of steps")
    steps = int(popsize * 0.90)
    if steps < 0:
        raise ConfigurationError(f"wrong number of steps entered: {steps}")
    scaling = float(steps)
    nref = 0
    if steps == 0:
        nref = tokens.next(int, "number of preferential reference points")
        scaling = 20.0

    tokens.next(int, "adaptive reference points flag")
    adaptive_increment = 1

    tokens.next(int, "population size")
    if popsize < 4 or popsize % 4 != 0:
        raise ConfigurationError(f"wrong population size: {popsize}")

    tokens.next(int, "number of generations")

    ncon = tokens.next(int, "number of constraints") + 1
    if ncon < 0:
        raise ConfigurationError(f"wrong number of constraints entered: {ncon}")

    ef_size = tokens.next(int, "number of real variables")
    lc_begin = ef_size
    animal_begin = ef_size + lc_variables
    nreal = ef_size + lc_variables + animal_variables
    if nreal < 0:
        raise ConfigurationError(f"wrong number of variables entered: {nreal}")

    min_realvar = [0.0] * nreal
    max_realvar = [1.0] * nreal
    pcross_real = pmut_real = eta_c = eta_m = 0.0
    if nreal != 0:
        pcross_real = tokens.next(float, "probability of crossover of real variables")
        if pcross_real < 0.0 or pcross_real > 1.0:
            raise ConfigurationError(
                f"probability of crossover of real variables is out of bounds: {pcross_real}"
            )
        pmut_real = 1.0 / nreal
        eta_c = tokens.next(float, "distribution index for crossover")
        if eta_c <= 0:
            raise ConfigurationError(f"wrong value of distribution index for crossover: {eta_c}")
        eta_m = tokens.next(float, "distribution index for mutation")
        if eta_m <= 0:
            raise ConfigurationError(f"wrong value of distribution index for mutation: {eta_m}")

    nbin = tokens.next(int, "number of binary variables")
    if nbin != 0:
        raise ConfigurationError(f"wrong number of binary variables entered: {nbin}")
    if nreal == 0:
        raise ConfigurationError("number of real as well as binary variables, both are zero")

    choice = tokens.next(int, "display choice")
    if choice not in (0, 1):
        raise ConfigurationError(f"entered the wrong choice, choice entered was {choice}")
    obj1 = obj2 = obj3 = angle1 = angle2 = 0
    if choice == 1:
        if nobj == 2:
            obj1 = _read_axis(tokens, nobj, "X")
            obj2 = _read_axis(tokens, nobj, "Y")
            obj3 = -1
        else:
            choice = tokens.next(int, "display dimensions")
            if choice not in (2, 3):
                raise ConfigurationError(f"entered the wrong choice, choice entered was {choice}")
            obj1 = _read_axis(tokens, nobj, "X")
            obj2 = _read_axis(tokens, nobj, "Y")
            if choice == 2:
                obj3 = -1
            else:
                obj3 = _read_axis(tokens, nobj, "Z")
                angle1 = tokens.next(int, "first angle")
                if angle1 < 0 or angle1 > 180:
                    raise ConfigurationError("wrong value for first angle entered")
                angle2 = tokens.next(int, "second angle")
                if angle2 < 0 or angle2 > 360:
                    raise ConfigurationError("wrong value for second angle entered")

    return ProblemSettings(
        nobj=nobj,
        steps=steps,
        nref=nref,
        scaling=scaling,
        adaptive_increment=adaptive_increment,
        popsize=popsize,
        ncon=ncon,
        nreal=nreal,
        ef_size=ef_size,
        lc_begin=lc_begin,
        lc_size=lc_variables,
        animal_begin=animal_begin,
        animal_size=animal_variables,
        min_realvar=min_realvar,
        max_realvar=max_realvar,
        pcross_real=pcross_real,
        pmut_real=pmut_real,
        eta_c=eta_c,
        eta_m=eta_m,
        nbin=nbin,
        choice=choice,
        obj1=obj1,
        obj2=obj2,
        obj3=obj3,
        angle1=angle1,
        angle2=angle2,
    )


def write_params(stream: TextIO, settings: ProblemSettings, seed: float) -> None:
    """Write the parameters of the run as read by the program."""
    s = settings
    stream.write("# This file contains information about inputs as read by the program\n")
    stream.write(f"\n Population size = {s.popsize:d}")
    stream.write(f"\n Number of generations = {s.ngen:d}")
    stream.write(f"\n Number of objective functions = {s.nobj:d}")
    stream.write(f"\n Number of constraints = {s.ncon:d}")
    stream.write(f"\n Number of real variables = {s.nreal:d}")
    if s.nreal != 0:
        for number, (low, high) in enumerate(zip(s.min_realvar, s.max_realvar), start=1):
            stream.write(f"\n Lower limit of real variable {number:d} = {low:e}")
            stream.write(f"\n Upper limit of real variable {number:d} = {high:e}")
        stream.write(f"\n Probability of crossover of real variable = {s.pcross_real:e}")
        stream.write(f"\n Probability of mutation of real variable = {s.pmut_real:e}")
        stream.write(f"\n Distribution index for crossover = {s.eta_c:e}")
        stream.write(f"\n Distribution index for mutation = {s.eta_m:e}")
    stream.write(f"\n Number of binary variables = {s.nbin:d}")
    if s.nbin != 0:
        for number, (bits, low, high) in enumerate(
            zip(s.nbits, s.min_binvar, s.max_binvar), start=1
        ):
            stream.write(f"\n Number of bits for binary variable {number:d} = {bits:d}")
            stream.write(f"\n Lower limit of binary variable {number:d} = {low:e}")
            stream.write(f"\n Upper limit of binary variable {number:d} = {high:e}")
        stream.write(f"\n Probability of crossover of binary variable = {s.pcross_bin:e}")
        stream.write(f"\n Probability of mutation of binary variable = {s.pmut_bin:e}")
    stream.write(f"\n Seed for random number generator = {seed:e}")
    stream.write(f"\n Approach {s.adaptive_increment:d} used for reference points")


def write_run_summary(
    stream: TextIO,
    settings: ProblemSettings,
    nrealmut: int,
    nrealcross: int,
    onref: int,
    nref: int,
) -> None:
    """Write the operator counts and reference-point counts at the end of a run."""
    if settings.nreal != 0:
        stream.write(f"\n Number of crossover of real variable = {nrealcross:d}")
        stream.write(f"\n Number of mutation of real variable = {nrealmut:d}")
    stream.write(f"\n Number of reference points initially = {onref:d}")
    stream.write(f"\n Number of reference points finally = {nref:d}")
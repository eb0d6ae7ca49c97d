import io

import pytest

from castopt.settings import (
    ConfigurationError,
    ProblemSettings,
    RunArguments,
    read_problem_settings,
    write_params,
    write_run_summary,
)

UUID = "00000000-0000-0000-0000-000000000075"


def _argv(evaluation="corecast", seed="0.5"):
    return [seed, UUID, evaluation, "10", "./", "20", "3", "0",
            "/tmp/scenario.csv", "0.3", "10", "2", "8"]


def _settings(text, popsize=20, lc=0, animal=0):
    return read_problem_settings(io.StringIO(text), popsize, lc, animal)


BASIC = "3 0 1 20 10 0 5 0.9 20 20 0 0"


def test_from_argv_parses_fields():
    args = RunArguments.from_argv(_argv("corecast+smartinit"))
    assert args.seed == 0.5
    assert args.emo_uuid == UUID
    assert args.n_injected_points == 10
    assert args.injected_points_filename == "./"
    assert args.popsize == 20
    assert args.ngen == 3
    assert args.ipopt_reduction == 0.3
    assert args.cost_profile_idx == 8
    assert args.smart_init


def test_from_argv_without_smart_init_drops_injection():
    args = RunArguments.from_argv(_argv("mathmodel"))
    assert args.n_injected_points == 0
    assert args.injected_points_filename == ""
    assert not args.smart_init


def test_from_argv_rejects_unknown_evaluation():
    with pytest.raises(ConfigurationError):
        RunArguments.from_argv(_argv("send"))


@pytest.mark.parametrize("seed", ["0", "1", "1.5", "-0.2"])
def test_from_argv_rejects_seed_outside_unit_interval(seed):
    with pytest.raises(ConfigurationError):
        RunArguments.from_argv(_argv(seed=seed))


def test_from_argv_rejects_too_few_arguments():
    with pytest.raises(ConfigurationError):
        RunArguments.from_argv(["0.5", UUID])


def test_from_argv_rejects_non_numeric():
    argv = _argv()
    argv[5] = "many"
    with pytest.raises(ConfigurationError):
        RunArguments.from_argv(argv)


def test_read_settings_basic():
    s = _settings(BASIC)
    assert s.nobj == 3
    assert s.ncon == 1
    assert s.nreal == 5
    assert s.pcross_real == 0.9
    assert s.eta_c == 20.0 and s.eta_m == 20.0
    assert s.pmut_real * s.nreal == pytest.approx(1.0)
    assert s.adaptive_increment == 1
    assert s.min_realvar == [0.0] * 5
    assert s.max_realvar == [1.0] * 5
    assert s.choice == 0
    assert s.bitlength == 0


def test_steps_come_from_population_size():
    s = _settings(BASIC, popsize=20)
    assert s.steps == 18
    assert s.scaling == float(s.steps)


def test_extra_variables_follow_real_variables():
    s = _settings(BASIC, lc=2, animal=3)
    assert s.ef_size == 5
    assert s.lc_begin == 5
    assert s.animal_begin == 7
    assert s.nreal == 10
    assert len(s.max_realvar) == s.nreal


def test_display_choice_two_objectives():
    s = _settings("2 0 1 20 10 0 5 0.9 20 20 0 1 1 2")
    assert (s.choice, s.obj1, s.obj2, s.obj3) == (1, 1, 2, -1)


def test_display_choice_three_dimensional():
    s = _settings("3 0 1 20 10 0 5 0.9 20 20 0 1 3 1 2 3 60 30")
    assert (s.choice, s.obj1, s.obj2, s.obj3, s.angle1, s.angle2) == (3, 1, 2, 3, 60, 30)


@pytest.mark.parametrize(
    "text, popsize",
    [
        ("0 0 1 20 10 0 5 0.9 20 20 0 0", 20),
        (BASIC, 6),
        ("3 0 1 20 10 0 5 1.5 20 20 0 0", 20),
        ("3 0 1 20 10 0 5 0.9 0 20 0 0", 20),
        ("3 0 1 20 10 0 5 0.9 20 -1 0 0", 20),
        ("3 0 1 20 10 0 5 0.9 20 20 1 0", 20),
        ("3 0 1 20 10 0 5 0.9 20 20 0 2", 20),
        ("3 0 1 20 10 0 0 0 2", 20),
        ("2 0 1 20 10 0 5 0.9 20 20 0 1 3 1", 20),
        ("3 0 1 20", 20),
    ],
)
def test_read_settings_errors(text, popsize):
    with pytest.raises(ConfigurationError):
        _settings(text, popsize=popsize)


def test_write_params_round_trip():
    s = _settings(BASIC)
    s.ngen = 7
    stream = io.StringIO()
    write_params(stream, s, 0.5)
    text = stream.getvalue()
    assert text.startswith("# This file contains information about inputs as read by the program\n")
    values = {}
    for line in text.splitlines()[1:]:
        if "=" in line:
            name, value = line.split("=")
            values[name.strip()] = value.strip()
    assert int(values["Population size"]) == s.popsize
    assert int(values["Number of generations"]) == 7
    assert int(values["Number of real variables"]) == s.nreal
    assert float(values["Upper limit of real variable 5"]) == 1.0
    assert float(values["Probability of mutation of real variable"]) == pytest.approx(s.pmut_real)
    assert float(values["Seed for random number generator"]) == 0.5
    assert "Approach 1 used for reference points" in text


def test_write_run_summary_lines():
    s = _settings(BASIC)
    stream = io.StringIO()
    write_run_summary(stream, s, 12, 34, 15, 15)
    lines = [line for line in stream.getvalue().split("\n") if line]
    assert lines == [
        " Number of crossover of real variable = 34",
        " Number of mutation of real variable = 12",
        " Number of reference points initially = 15",
        " Number of reference points finally = 15",
    ]


def test_settings_bitlength_sums_bits():
    s = ProblemSettings(
        nobj=2, steps=1, nref=0, scaling=1.0, adaptive_increment=1, popsize=4,
        ncon=1, nreal=1, ef_size=1, lc_begin=1, lc_size=0, animal_begin=1,
        animal_size=0, min_realvar=[0.0], max_realvar=[1.0], pcross_real=0.9,
        pmut_real=1.0, eta_c=20.0, eta_m=20.0, nbin=2, nbits=[3, 4],
    )
    assert s.bitlength == sum(s.nbits)
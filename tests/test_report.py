import io

from castopt.individual import Individual
from castopt.report import feasible_front, report_feasible, report_pop


def _population():
    return [
        Individual(xreal=[0.1, 0.2], obj=[1.0, 2.5], constr_violation=0.0, rank=1),
        Individual(xreal=[0.3, 0.4], obj=[3.0, 0.5], constr_violation=-0.2, rank=1),
        Individual(xreal=[0.5, 0.6], obj=[4.0, 4.0], constr_violation=0.0, rank=2),
        Individual(xreal=[0.7, 0.8], obj=[0.25, 7.0], constr_violation=0.0, rank=1),
    ]


def test_feasible_front_keeps_only_feasible_first_rank():
    pop = _population()
    front = feasible_front(pop)
    assert front == [pop[0], pop[3]]


def test_feasible_front_empty_population():
    assert feasible_front([]) == []


def test_report_pop_exact_line_format():
    stream = io.StringIO()
    report_pop([Individual(obj=[1.0, 2.5], constr_violation=0.0, rank=1)], stream)
    assert stream.getvalue() == "1.000000e+00\t2.500000e+00\t0.000000e+00\t1\n"


def test_report_pop_round_trip():
    pop = _population()
    stream = io.StringIO()
    report_pop(pop, stream)
    lines = stream.getvalue().splitlines()
    assert len(lines) == len(pop)
    for line, ind in zip(lines, pop):
        fields = line.split("\t")
        assert [float(v) for v in fields[:2]] == ind.obj
        assert float(fields[2]) == ind.constr_violation
        assert int(fields[3]) == ind.rank


def test_report_pop_writes_genes_before_violation():
    ind = Individual(obj=[1.0], gene=[[1, 0], [1]], constr_violation=0.0, rank=3)
    stream = io.StringIO()
    report_pop([ind], stream)
    fields = stream.getvalue().rstrip("\n").split("\t")
    assert fields[1:4] == ["1", "0", "1"]
    assert fields[-1] == "3"


def test_report_feasible_round_trip():
    pop = _population()
    stream = io.StringIO()
    report_feasible(pop, stream)
    lines = stream.getvalue().splitlines()
    front = feasible_front(pop)
    assert len(lines) == len(front)
    for line, ind in zip(lines, front):
        values = [float(v) for v in line.split("\t") if v]
        assert values == ind.obj + ind.xreal


def test_report_feasible_no_feasible_writes_nothing():
    stream = io.StringIO()
    report_feasible([Individual(obj=[1.0], constr_violation=-1.0, rank=1)], stream)
    assert stream.getvalue() == ""
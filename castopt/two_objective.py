"""Two- and three-objective benchmark problems from the classic test suites."""

from __future__ import annotations

import math
from typing import Sequence

from castopt.many_objective import PI, ProblemResult


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except (ValueError, ZeroDivisionError):
        return math.nan


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _div(num: float, den: float) -> float:
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _require(xreal: Sequence[float], count: int, name: str) -> None:
    if len(xreal) < count:
        raise ValueError(f"{name} needs {count} variables, got {len(xreal)}")


def sch1(xreal: Sequence[float]) -> ProblemResult:
    """Schaffer's first problem (one variable)."""
    _require(xreal, 1, "sch1")
    x = xreal[0]
    return ProblemResult([_pow(x, 2.0), _pow(x - 2.0, 2.0)])


def sch2(xreal: Sequence[float]) -> ProblemResult:
    """Schaffer's second problem, piecewise in the first objective."""
    _require(xreal, 1, "sch2")
    x = xreal[0]
    if x <= 1.0:
        f0 = -x
    elif x <= 3.0:
        f0 = x - 2.0
    elif x <= 4.0:
        f0 = 4.0 - x
    else:
        f0 = x - 4.0
    return ProblemResult([f0, _pow(x - 5.0, 2.0)])


def fon(xreal: Sequence[float]) -> ProblemResult:
    """Fonseca and Fleming's problem for any number of variables."""
    _require(xreal, 1, "fon")
    shift = 1.0 / math.sqrt(len(xreal))
    s1 = sum(_pow(x - shift, 2.0) for x in xreal)
    s2 = sum(_pow(x + shift, 2.0) for x in xreal)
    return ProblemResult([1.0 - math.exp(-s1), 1.0 - math.exp(-s2)])


def kur(xreal: Sequence[float]) -> ProblemResult:
    """Kursawe's problem (three variables)."""
    _require(xreal, 3, "kur")
    x = xreal
    res1 = -0.2 * math.sqrt(x[0] * x[0] + x[1] * x[1])
    res2 = -0.2 * math.sqrt(x[1] * x[1] + x[2] * x[2])
    f0 = -10.0 * (math.exp(res1) + math.exp(res2))
    f1 = sum(_pow(abs(v), 0.8) + 5.0 * math.sin(_pow(v, 3.0)) for v in x[:3])
    return ProblemResult([f0, f1])


def pol(xreal: Sequence[float]) -> ProblemResult:
    """Poloni's problem (two variables)."""
    _require(xreal, 2, "pol")
    x0, x1 = xreal[0], xreal[1]
    a1 = 0.5 * math.sin(1.0) - 2.0 * math.cos(1.0) + math.sin(2.0) - 1.5 * math.cos(2.0)
    a2 = 1.5 * math.sin(1.0) - math.cos(1.0) + 2.0 * math.sin(2.0) - 0.5 * math.cos(2.0)
    b1 = 0.5 * math.sin(x0) - 2.0 * math.cos(x0) + math.sin(x1) - 1.5 * math.cos(x1)
    b2 = 1.5 * math.sin(x0) - math.cos(x0) + 2.0 * math.sin(x1) - 0.5 * math.cos(x1)
    f0 = 1.0 + _pow(a1 - b1, 2.0) + _pow(a2 - b2, 2.0)
    f1 = _pow(x0 + 3.0, 2.0) + _pow(x1 + 1.0, 2.0)
    return ProblemResult([f0, f1])


def vnt(xreal: Sequence[float]) -> ProblemResult:
    """Viennet's problem (two variables, three objectives)."""
    _require(xreal, 2, "vnt")
    x0, x1 = xreal[0], xreal[1]
    r2 = x0 * x0 + x1 * x1
    f0 = 0.5 * r2 + math.sin(r2)
    f1 = (_pow(3.0 * x0 - 2.0 * x1 + 4.0, 2.0)) / 8.0 + (_pow(x0 - x1 + 1.0, 2.0)) / 27.0 + 15.0
    f2 = 1.0 / (r2 + 1.0) - 1.1 * math.exp(-r2)
    return ProblemResult([f0, f1, f2])


def _zdt_g(xreal: Sequence[float]) -> float:
    return 1.0 + 9.0 * sum(xreal[1:30]) / 29.0


def zdt1(xreal: Sequence[float]) -> ProblemResult:
    """ZDT1: convex front (thirty variables)."""
    _require(xreal, 30, "zdt1")
    f1 = xreal[0]
    g = _zdt_g(xreal)
    h = 1.0 - _sqrt(f1 / g)
    return ProblemResult([f1, g * h])


def zdt2(xreal: Sequence[float]) -> ProblemResult:
    """ZDT2: non-convex front (thirty variables)."""
    _require(xreal, 30, "zdt2")
    f1 = xreal[0]
    g = _zdt_g(xreal)
    h = 1.0 - _pow(f1 / g, 2.0)
    return ProblemResult([f1, g * h])


def zdt3(xreal: Sequence[float]) -> ProblemResult:
    """ZDT3: disconnected front (thirty variables)."""
    _require(xreal, 30, "zdt3")
    f1 = xreal[0]
    g = _zdt_g(xreal)
    h = 1.0 - _sqrt(f1 / g) - (f1 / g) * math.sin(10.0 * PI * f1)
    return ProblemResult([f1, g * h])


def zdt4(xreal: Sequence[float]) -> ProblemResult:
    """ZDT4: multimodal distance function (ten variables)."""
    _require(xreal, 10, "zdt4")
    f1 = xreal[0]
    g = 91.0 + sum(x * x - 10.0 * math.cos(4.0 * PI * x) for x in xreal[1:10])
    h = 1.0 - _sqrt(f1 / g)
    return ProblemResult([f1, g * h])


def zdt5(gene: Sequence[Sequence[int]]) -> ProblemResult:
    """ZDT5: binary problem with eleven variables (30 bits, then 5 bits each)."""
    if len(gene) < 11:
        raise ValueError(f"zdt5 needs 11 binary variables, got {len(gene)}")
    if len(gene[0]) < 30:
        raise ValueError(f"zdt5 needs 30 bits in the first variable, got {len(gene[0])}")
    for bits in gene[1:11]:
        if len(bits) < 4:
            raise ValueError(f"zdt5 needs at least 4 bits per variable, got {len(bits)}")
    u0 = sum(1 for bit in gene[0][:30] if bit == 1)
    f1 = 1.0 + u0
    g = 0
    for bits in gene[1:11]:
        u = sum(1 for bit in bits[:4] if bit == 1)
        g += 2 + u if u < 5 else 1
    return ProblemResult([f1, g * (1.0 / f1)])


def zdt6(xreal: Sequence[float]) -> ProblemResult:
    """ZDT6: non-uniform front (ten variables)."""
    _require(xreal, 10, "zdt6")
    x0 = xreal[0]
    f1 = 1.0 - math.exp(-4.0 * x0) * _pow(math.sin(4.0 * PI * x0), 6.0)
    g = sum(xreal[1:10]) / 9.0
    g = 1.0 + 9.0 * _pow(g, 0.25)
    h = 1.0 - _pow(f1 / g, 2.0)
    return ProblemResult([f1, g * h])


def bnh(xreal: Sequence[float]) -> ProblemResult:
    """Binh and Korn's constrained problem."""
    _require(xreal, 2, "bnh")
    x0, x1 = xreal[0], xreal[1]
    obj = [
        4.0 * (x0 * x0 + x1 * x1),
        _pow(x0 - 5.0, 2.0) + _pow(x1 - 5.0, 2.0),
    ]
    constr = [
        1.0 - (_pow(x0 - 5.0, 2.0) + x1 * x1) / 25.0,
        (_pow(x0 - 8.0, 2.0) + _pow(x1 + 3.0, 2.0)) / 7.7 - 1.0,
    ]
    return ProblemResult(obj, constr)


def osy(xreal: Sequence[float]) -> ProblemResult:
    """Osyczka and Kundu's constrained problem (six variables)."""
    _require(xreal, 6, "osy")
    x = xreal
    obj = [
        -(25.0 * _pow(x[0] - 2.0, 2.0) + _pow(x[1] - 2.0, 2.0) + _pow(x[2] - 1.0, 2.0)
          + _pow(x[3] - 4.0, 2.0) + _pow(x[4] - 1.0, 2.0)),
        sum(v * v for v in x[:6]),
    ]
    constr = [
        (x[0] + x[1]) / 2.0 - 1.0,
        1.0 - (x[0] + x[1]) / 6.0,
        1.0 - x[1] / 2.0 + x[0] / 2.0,
        1.0 - x[0] / 2.0 + 3.0 * x[1] / 2.0,
        1.0 - (_pow(x[2] - 3.0, 2.0)) / 4.0 - x[3] / 4.0,
        (_pow(x[4] - 3.0, 2.0)) / 4.0 + x[5] / 4.0 - 1.0,
    ]
    return ProblemResult(obj, constr)


def srn(xreal: Sequence[float]) -> ProblemResult:
    """Srinivas and Deb's constrained problem."""
    _require(xreal, 2, "srn")
    x0, x1 = xreal[0], xreal[1]
    obj = [
        2.0 + _pow(x0 - 2.0, 2.0) + _pow(x1 - 1.0, 2.0),
        9.0 * x0 - _pow(x1 - 1.0, 2.0),
    ]
    constr = [
        1.0 - (_pow(x0, 2.0) + _pow(x1, 2.0)) / 225.0,
        3.0 * x1 / 10.0 - x0 / 10.0 - 1.0,
    ]
    return ProblemResult(obj, constr)


def tnk(xreal: Sequence[float]) -> ProblemResult:
    """Tanaka's constrained problem."""
    _require(xreal, 2, "tnk")
    x0, x1 = xreal[0], xreal[1]
    if x1 == 0.0:
        c0 = -1.0
    else:
        c0 = x0 * x0 + x1 * x1 - 0.1 * math.cos(16.0 * math.atan(x0 / x1)) - 1.0
    c1 = 1.0 - 2.0 * _pow(x0 - 0.5, 2.0) + 2.0 * _pow(x1 - 0.5, 2.0)
    return ProblemResult([x0, x1], [c0, c1])


def ctp1(xreal: Sequence[float]) -> ProblemResult:
    """CTP1: exponential front with two constraints."""
    _require(xreal, 2, "ctp1")
    g = 1.0 + xreal[1]
    f0 = xreal[0]
    f1 = g * math.exp(-f0 / g)
    constr = [
        f1 / (0.858 * math.exp(-0.541 * f0)) - 1.0,
        f1 / (0.728 * math.exp(-0.295 * f0)) - 1.0,
    ]
    return ProblemResult([f0, f1], constr)


def _ctp_objectives(xreal: Sequence[float], name: str) -> list[float]:
    _require(xreal, 2, name)
    g = 1.0 + xreal[1]
    f0 = xreal[0]
    return [f0, g * (1.0 - _sqrt(f0 / g))]


def _ctp_constraint(
    obj: Sequence[float], theta: float, a: float, b: float, c: float, d: float, e: float
) -> float:
    exp1 = (obj[1] - e) * math.cos(theta) - obj[0] * math.sin(theta)
    exp2 = (obj[1] - e) * math.sin(theta) + obj[0] * math.cos(theta)
    exp2 = b * PI * _pow(exp2, c)
    exp2 = abs(math.sin(exp2)) if math.isfinite(exp2) else math.nan
    exp2 = a * _pow(exp2, d)
    return _div(exp1, exp2) - 1.0


def _ctp(xreal: Sequence[float], name: str, *params: float) -> ProblemResult:
    obj = _ctp_objectives(xreal, name)
    return ProblemResult(obj, [_ctp_constraint(obj, *params)])


def ctp2(xreal: Sequence[float]) -> ProblemResult:
    """CTP2: disconnected feasible patches on the front."""
    return _ctp(xreal, "ctp2", -0.2 * PI, 0.2, 10.0, 1.0, 6.0, 1.0)


def ctp3(xreal: Sequence[float]) -> ProblemResult:
    """CTP3: feasible front reduced to isolated points."""
    return _ctp(xreal, "ctp3", -0.2 * PI, 0.1, 10.0, 1.0, 0.5, 1.0)


def ctp4(xreal: Sequence[float]) -> ProblemResult:
    """CTP4: harder variant of CTP3."""
    return _ctp(xreal, "ctp4", -0.2 * PI, 0.75, 10.0, 1.0, 0.5, 1.0)


def ctp5(xreal: Sequence[float]) -> ProblemResult:
    """CTP5: non-uniformly spaced isolated feasible points."""
    return _ctp(xreal, "ctp5", -0.2 * PI, 0.1, 10.0, 2.0, 0.5, 1.0)


def ctp6(xreal: Sequence[float]) -> ProblemResult:
    """CTP6: infeasible bands across the search space."""
    return _ctp(xreal, "ctp6", 0.1 * PI, 40.0, 0.5, 1.0, 2.0, -2.0)


def ctp7(xreal: Sequence[float]) -> ProblemResult:
    """CTP7: disconnected feasible front segments."""
    return _ctp(xreal, "ctp7", -0.05 * PI, 40.0, 5.0, 1.0, 6.0, 0.0)


def ctp8(xreal: Sequence[float]) -> ProblemResult:
    """CTP8: the CTP6 and CTP7 constraints together."""
    obj = _ctp_objectives(xreal, "ctp8")
    constr = [
        _ctp_constraint(obj, 0.1 * PI, 40.0, 0.5, 1.0, 2.0, -2.0),
        _ctp_constraint(obj, -0.05 * PI, 40.0, 2.0, 1.0, 6.0, 0.0),
    ]
    return ProblemResult(obj, constr)
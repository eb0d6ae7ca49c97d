"""Many-objective benchmark problems and real-world engineering design problems."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Sequence

PI = 3.14159265358979
INF = 1.0e14


@dataclass
class ProblemResult:
    """Objective values and constraint values of one evaluation."""

    obj: list[float]
    constr: list[float] = field(default_factory=list)


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _check_dtlz(xreal: Sequence[float], nobj: int) -> None:
    if nobj < 1:
        raise ValueError(f"number of objectives must be positive, got {nobj}")
    if len(xreal) < nobj - 1:
        raise ValueError(
            f"{nobj} objectives need at least {nobj - 1} variables, got {len(xreal)}"
        )


def _require(xreal: Sequence[float], count: int, name: str) -> None:
    if len(xreal) < count:
        raise ValueError(f"{name} needs {count} variables, got {len(xreal)}")


def _rastrigin_g(xreal: Sequence[float], nobj: int, scale: float) -> float:
    return sum(
        scale * (1.0 + (x - 0.5) * (x - 0.5) - math.cos(20.0 * PI * (x - 0.5)))
        for x in xreal[nobj - 1:]
    )


def _sphere_g(xreal: Sequence[float], nobj: int, scale: float = 1.0) -> float:
    return sum(scale * (x - 0.5) * (x - 0.5) for x in xreal[nobj - 1:])


def _linear_front(xreal: Sequence[float], nobj: int, g: float) -> list[float]:
    obj = []
    for j in range(nobj):
        prod = math.prod(xreal[: nobj - j - 1])
        tail = 1.0 - xreal[nobj - j - 1] if j > 0 else 1.0
        obj.append(0.5 * (1.0 + g) * prod * tail)
    return obj


def _spherical_front(
    xreal: Sequence[float],
    nobj: int,
    g: float,
    angle: Callable[[float], float] = lambda v: v * PI / 2.0,
) -> list[float]:
    obj = []
    for j in range(nobj):
        prod = math.prod(math.cos(angle(x)) for x in xreal[: nobj - j - 1])
        tail = math.sin(angle(xreal[nobj - j - 1])) if j > 0 else 1.0
        obj.append((1.0 + g) * prod * tail)
    return obj


def _dtlz4_angle(v: float) -> float:
    return 0.5 * (1.0 + _pow((v - 0.5) / 0.5, 99.0)) * PI / 2.0


def dtlz1(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ1: linear front with a multimodal distance function."""
    _check_dtlz(xreal, nobj)
    g = _rastrigin_g(xreal, nobj, 100.0)
    return ProblemResult(_linear_front(xreal, nobj, g))


def dtlz1_inv(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """Inverted DTLZ1."""
    _check_dtlz(xreal, nobj)
    g = _rastrigin_g(xreal, nobj, 100.0)
    return ProblemResult([0.5 * (1 + g) - f for f in _linear_front(xreal, nobj, g)])


def dtlz2(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ2: spherical front."""
    _check_dtlz(xreal, nobj)
    g = _sphere_g(xreal, nobj)
    return ProblemResult(_spherical_front(xreal, nobj, g))


def dtlz2_constr(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ2 with a band constraint on the last objective."""
    result = dtlz2(xreal, nobj)
    last = result.obj[nobj - 1]
    result.constr = [(0.15 - last) * (0.85 - last)]
    return result


def dtlz2_inv(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """Inverted DTLZ2."""
    _check_dtlz(xreal, nobj)
    g = _sphere_g(xreal, nobj)
    obj = _spherical_front(xreal, nobj, g)
    top = _pow(1.0 + g, 4.0)
    inverted = [top - _pow(f, 4.0) for f in obj[:-1]]
    inverted.append(top - _pow(obj[-1], 2.0))
    return ProblemResult(inverted)


def dtlz2_convex(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """Convex DTLZ2."""
    _check_dtlz(xreal, nobj)
    g = _sphere_g(xreal, nobj)
    obj = _spherical_front(xreal, nobj, g)
    convex = [_pow(f, 4.0) for f in obj[:-1]]
    convex.append(obj[-1] * obj[-1])
    return ProblemResult(convex)


def dtlz3(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ3: spherical front with a multimodal distance function."""
    _check_dtlz(xreal, nobj)
    g = _rastrigin_g(xreal, nobj, 100.0)
    return ProblemResult(_spherical_front(xreal, nobj, g))


def dtlz4(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ4: spherical front with a biased density of solutions."""
    _check_dtlz(xreal, nobj)
    g = _sphere_g(xreal, nobj)
    return ProblemResult(_spherical_front(xreal, nobj, g, _dtlz4_angle))


def dtlz5(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ5: degenerate curve front."""
    _check_dtlz(xreal, nobj)
    g = sum(_pow(x, 0.3) for x in xreal[nobj - 1:])

    def theta(k: int) -> float:
        if k == 0:
            return xreal[0] * PI / 2.0
        return (2.0 * g * xreal[k] + 1.0) * PI / (4.0 * (1.0 + g))

    obj = []
    for j in range(nobj):
        prod = math.prod(math.cos(theta(k)) for k in range(nobj - j - 1))
        if j == 0:
            tail = 1.0
        elif j == nobj - 1:
            tail = math.sin(xreal[0] * PI / 2.0)
        else:
            tail = math.sin((2.0 * g * xreal[nobj - j - 1] + 1.0) * PI / (4.0 * (1.0 + g)))
        obj.append((1.0 + g) * prod * tail)
    return ProblemResult(obj)


def dtlz6(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ6 (the disconnected DTLZ7 front)."""
    _check_dtlz(xreal, nobj)
    nreal = len(xreal)
    g = sum(xreal[nobj - 1:])
    g = 1.0 + 9.0 * g / (nreal - nobj + 1.0)
    obj = list(xreal[: nobj - 1])
    sm = sum(f * (1.0 + math.sin(3.0 * PI * f)) / (1 + g) for f in obj)
    obj.append((1 + g) * (nobj - sm))
    return ProblemResult(obj)


def c1_dtlz1(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """C1-DTLZ1: DTLZ1 with a linear feasibility constraint."""
    result = dtlz1(xreal, nobj)
    obj = result.obj
    total = sum(f / 0.5 for f in obj[:-1]) + obj[-1] / 0.6
    result.constr = [1 - total]
    return result


def c1_dtlz3(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """C1-DTLZ3: DTLZ3 with an infeasible spherical band."""
    _check_dtlz(xreal, nobj)
    if nobj < 5:
        r = 9.0
    elif nobj <= 12:
        r = 12.5
    else:
        r = 15.0
    g = _rastrigin_g(xreal, nobj, 10.0)
    obj = _spherical_front(xreal, nobj, g)
    radius = sum(f * f for f in obj)
    return ProblemResult(obj, [(radius - 4.0 * 4.0) * (radius - r * r)])


def c2_dtlz2(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """C2-DTLZ2: DTLZ2 feasible only near the corners of the front."""
    result = dtlz2(xreal, nobj)
    obj = result.obj
    r = 0.5
    best = -1 * INF
    for j in range(nobj):
        dist = sum(
            (f - 1.0) * (f - 1.0) if k == j else f * f for k, f in enumerate(obj)
        )
        best = max(best, r * r - dist)
    result.constr = [best]
    return result


def dtlz1_hole(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """DTLZ1 with a hole-shaped feasible region around the centre of the front."""
    result = dtlz1(xreal, nobj)
    obj = result.obj
    r = 0.2 if nobj < 6 else 0.225
    lam = sum(obj) / nobj
    spread = sum(_pow(f - lam, 2.0) for f in obj)
    result.constr = [r * r - spread]
    return result


def c3_dtlz1(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """C3-DTLZ1: DTLZ1 with one linear constraint per objective."""
    result = dtlz1(xreal, nobj)
    obj = result.obj
    result.constr = [
        sum(f if j == i else f / 0.5 for j, f in enumerate(obj)) - 1.0
        for i in range(nobj)
    ]
    return result


def c3_dtlz4(xreal: Sequence[float], nobj: int) -> ProblemResult:
    """C3-DTLZ4: DTLZ4 with one quadratic constraint per objective."""
    _check_dtlz(xreal, nobj)
    g = _sphere_g(xreal, nobj, 10.0)
    obj = _spherical_front(xreal, nobj, g, _dtlz4_angle)
    constr = [
        sum(f * f / 4.0 if k == j else f * f for k, f in enumerate(obj)) - 1.0
        for j in range(nobj)
    ]
    return ProblemResult(obj, constr)


def crash(xreal: Sequence[float]) -> ProblemResult:
    """Vehicle crash-worthiness design (five variables, three objectives)."""
    _require(xreal, 5, "crash")
    x = xreal
    f0 = (1640.2823 + 2.3573285 * x[0] + 2.3220035 * x[1]
          + 4.5688768 * x[2] + 7.7213633 * x[3] + 4.4559504 * x[4])
    f1 = (6.5856 + 1.15 * x[0] - 1.0427 * x[1] + 0.9738 * x[2]
          + 0.8364 * x[3] - 0.3695 * x[0] * x[3] + 0.0861 * x[0] * x[4]
          + 0.3628 * x[1] * x[3] - 0.1106 * x[0] * x[0] - 0.3437 * x[2] * x[2]
          + 0.1764 * x[3] * x[3])
    f2 = (-0.0551 + 0.0181 * x[0] + 0.1024 * x[1] + 0.0421 * x[2]
          - 0.0073 * x[0] * x[1] + 0.0204 * x[1] * x[2] - 0.0118 * x[1] * x[3]
          - 0.0204 * x[2] * x[3] - 0.008 * x[2] * x[4] - 0.0241 * x[1] * x[1]
          + 0.0109 * x[3] * x[3])
    return ProblemResult([f0, f1, f2])


def welded_beam(xreal: Sequence[float]) -> ProblemResult:
    """Welded beam design: h, l, t, b; cost and deflection with four constraints."""
    _require(xreal, 4, "welded_beam")
    h, length, t_, b = xreal[0], xreal[1], xreal[2], xreal[3]
    f0 = 1.10471 * h * h * length + 0.04811 * t_ * b * (14.0 + length)
    f1 = 2.1952 / (t_ * t_ * t_ * b)
    root = math.sqrt(length * length + (h + t_) * (h + t_))
    t1 = 6000.0 / (math.sqrt(2) * h * length)
    t2 = (6000.0 * (14.0 + 0.5 * length) * root) / (
        2.0 * 0.707 * h * length * (length * length / 12.0 + 0.25 * (h + t_) * (h + t_))
    )
    tau = _sqrt(t1 * t1 + t2 * t2 + (length * t1 * t2) / root)
    sigma = 504000.0 / (t_ * t_ * b)
    p = 64746.022 * (1 - 0.0282346 * t_) * t_ * b * b * b
    constr = [
        (13600.0 - tau) / 13600.0,
        (30000.0 - sigma) / 30000.0,
        b - h,
        (p - 6000.0) / 6000,
    ]
    return ProblemResult([f0, f1], constr)


def car(xreal: Sequence[float]) -> ProblemResult:
    """Car side-impact design (seven variables, three objectives, ten constraints)."""
    _require(xreal, 7, "car")
    x = xreal
    y0, y1 = 0.345, 0.192
    c = [
        1.16 - 0.3717 * x[1] * x[3] - 0.484 * x[2] * y1,
        0.261 - 0.0159 * x[0] * x[1] - 0.188 * x[0] * y0 - 0.019 * x[1] * x[6]
        + 0.0144 * x[2] * x[4] + 0.08045 * x[5] * y1,
        0.214 + 0.00817 * x[4] - 0.131 * x[0] * y0 - 0.0704 * x[0] * y1
        + 0.03099 * x[1] * x[5] - 0.018 * x[1] * x[6] + 0.0208 * x[2] * y0
        + 0.121 * x[2] * y1 - 0.00364 * x[4] * x[5] - 0.018 * x[1] * x[1],
        0.74 - 0.61 * x[1] - 0.163 * x[2] * y0 - 0.166 * x[6] * y1 + 0.227 * x[1] * x[1],
        28.98 + 3.818 * x[2] - 4.2 * x[0] * x[1] + 6.63 * x[5] * y1 - 7.77 * x[6] * y0,
        33.86 + 2.95 * x[2] - 5.057 * x[0] * x[1] - 11 * x[1] * y0 - 9.98 * x[6] * y0
        + 22 * y0 * y1,
        46.36 - 9.9 * x[1] - 12.9 * x[0] * y0,
        4.72 - 0.5 * x[3] - 0.19 * x[1] * x[2],
        10.58 - 0.674 * x[0] * x[1] - 1.95 * x[1] * y0,
        16.45 - 0.489 * x[2] * x[6] - 0.843 * x[4] * x[5],
    ]
    obj = [
        1.98 + 4.9 * x[0] + 6.67 * x[1] + 6.98 * x[2] + 4.01 * x[3] + 1.78 * x[4]
        + 0.00001 * x[5] + 2.73 * x[6],
        c[7],
        (c[8] + c[9]) / 2.0,
    ]
    limits = (1.0, 0.32, 0.32, 0.32, 32.0, 32.0, 32.0, 4.0, 9.9, 15.7)
    constr = [1 - value / limit for value, limit in zip(c, limits)]
    return ProblemResult(obj, constr)


def water(xreal: Sequence[float]) -> ProblemResult:
    """Water resource planning (three variables, five objectives, seven constraints)."""
    _require(xreal, 3, "water")
    x = xreal
    x01 = x[0] * x[1]
    obj = [
        (106780.37 * (x[1] + x[2]) + 61704.67) / (8.0 * 10000.0),
        3000.0 * x[0] / 1500.0,
        305700.0 * 2289.0 * x[1] / _pow(0.06 * 2289.0, 0.65) / (3.0 * 1000000.0),
        250.0 * 2289.0 * math.exp(-39.75 * x[1] + 9.9 * x[2] + 2.74) / (6.0 * 1000000.0),
        25.0 * ((1.39 / x01) + 4940.0 * x[2] - 80.0) / 8000.0,
    ]
    constr = [
        1.0 - (0.00139 / x01 + 4.94 * x[2] - 0.08),
        1.0 - (0.000306 / x01 + 1.082 * x[2] - 0.0986),
        (50000.0 - (12.307 / x01 + 49408.24 * x[2] + 4051.02)) / 50000.0,
        (16000.0 - (2.098 / x01 + 8046.33 * x[2] - 696.71)) / 16000.0,
        (10000.0 - (2.138 / x01 + 7883.39 * x[2] - 705.04)) / 10000.0,
        (2000.0 - (0.417 * x01 + 1721.26 * x[2] - 136.54)) / 2000.0,
        (550.0 - (0.164 / x01 + 631.13 * x[2] - 54.48)) / 550.0,
    ]
    return ProblemResult(obj, constr)


def machining(xreal: Sequence[float]) -> ProblemResult:
    """Metal cutting (three variables, four objectives, three constraints)."""
    _require(xreal, 3, "machining")
    x = xreal
    obj = [
        7.49 - 0.44 * x[0] + 1.16 * x[1] - 0.61 * x[2],
        4.13 - 0.92 * x[0] + 0.16 * x[1] - 0.43 * x[2],
        -21.90 + 1.94 * x[0] + 0.30 * x[1] + 1.04 * x[2],
        11.331 - x[0] - x[1] - x[2],
    ]
    constr = [
        0.44 * x[0] - 1.16 * x[1] + 0.61 * x[2] - 3.1725,
        0.92 * x[0] - 0.16 * x[1] + 0.43 * x[2] - 8.0420,
        -1.94 * x[0] + 0.30 * x[1] + 1.04 * x[2] + 18.4988,
    ]
    return ProblemResult(obj, constr)


def wiper(xreal: Sequence[float]) -> ProblemResult:
    """Turning process (speed, feed, depth; three objectives, five constraints)."""
    _require(xreal, 3, "wiper")
    v, f, a = xreal[0], xreal[1], xreal[2]
    t1 = (1.25 * 3.1419) / (v * f)
    n1 = _pow(v, 1.672184) * _pow(f, 0.036654) * _pow(a, 0.072133)
    t2 = _pow(993.402604 * _pow(v, -0.200600) * _pow(f, 0.623620) * _pow(a, 0.660314)
              * _pow(1800.0, 0.158012), 2.0)
    t3 = _pow(320.402695 * _pow(v, -0.213734) * _pow(f, 0.293166) * _pow(a, 0.373255)
              * _pow(1800.0, 0.240112), 2.0)
    f1 = t1 * (1 + n1 / 85219.833) + 1.6
    f2 = t1 * (0.08 + n1 / 1693.304) + 0.14
    f3 = _sqrt(t1 + t2 + t3)
    roughness = (0.634065 - 0.004599 * v - 1.221571 * f - 1.125925 * a
                 + 0.000010 * v * v + 2.265811 * f * f + 0.007205 * v * f
                 + 0.007658 * v * a + 0.0000001 * v * 1800.0 + 6.020526 * f * a
                 - 0.039339 * v * f * a)
    force = (2.678195 - 0.015906 * v - 3.961551 * f - 4.844458 * a
             + 0.000027 * v * v + 3.816645 * f * f + 0.046635 * v * f
             + 0.033541 * v * a + 28.458806 * f * a + 0.001495 * a * 1800.0
             - 0.243340 * v * f * a - 0.008445 * f * a * 1800.0
             + 0.000049 * v * f * a * 1800.0)
    g5 = (2.775193 - 0.016948 * v - 2.123522 * f + 0.000042 * v * v
          + 5.430604 * f * f + 0.028112 * v * f - 0.0588322 * v * f * a
          + 0.000008 * v * a * 1800.0 - 6.3)
    leq = [roughness - 0.8, 0.2 - roughness, force - 4.0, 1.0 - force, g5]
    return ProblemResult([f1, f2, f3], [-1.0 * value for value in leq])
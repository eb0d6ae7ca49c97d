"""Structured reference points on the unit simplex."""

from __future__ import annotations

from pathlib import Path


def nchoosek(n: int, k: int) -> int:
    """Binomial coefficient computed as a rounded floating-point product."""
    if n == 0 and k == 0:
        return 1
    prod = 1.0
    for i in range(1, k + 1):
        prod *= (n + 1 - i) / i
    return int(prod + 0.5)


def generate_ref_points(nobj: int, p: int) -> list[list[float]]:
    """Das and Dennis points with ``p`` divisions per objective."""
    if p <= 0:
        raise ValueError("number of divisions must be positive")
    if nobj < 1:
        raise ValueError("number of objectives must be positive")
    delta = 1.0 / p
    m = nchoosek(nobj + p - 1, p)
    pts = [[0.0] * nobj for _ in range(m)]

    for i in range(nobj - 1):
        e = 0
        while e <= m - 1:
            limit = sum(pts[e][:i])
            for j in range(int((1 - limit) / delta + 0.5) + 1):
                beta = delta * j
                tp = int((1 - limit - beta) / delta + 0.5)
                no = nchoosek(nobj - i - 2 + tp, tp)
                for row in pts[e:e + no]:
                    row[i] = beta
                e += no

    for row in pts:
        row[nobj - 1] = 1 - sum(row[:nobj - 1])
    return pts


def create_ref_points(nobj: int, p: int) -> list[list[float]]:
    """Reference points, with an inner shrunken layer when ``nobj`` exceeds five."""
    pts = generate_ref_points(nobj, p)
    if nobj > 5:
        shift = 0.5 / nobj
        pts = [[value * 0.5 + shift for value in row] for row in pts]
        pts.extend(generate_ref_points(nobj, p + 1))
    return pts


def read_ref_points(path: str | Path, nobj: int, nref: int) -> list[list[float]]:
    """Read ``nref`` preferential points and normalise each to sum to one."""
    values = [float(tok) for tok in Path(path).read_text().split()]
    if len(values) < nobj * nref:
        raise ValueError(
            f"expected {nobj * nref} values for {nref} points, found {len(values)}"
        )
    points = []
    for start in range(0, nobj * nref, nobj):
        row = values[start:start + nobj]
        total = sum(row)
        points.append([v / total for v in row])
    return points
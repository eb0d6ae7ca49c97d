import math

import pytest

from castopt import many_objective as mo


def _point(nobj, distance_value, nreal=8, position=0.3):
    return [position] * (nobj - 1) + [distance_value] * (nreal - nobj + 1)


@pytest.mark.parametrize("nobj", [2, 3, 5])
def test_dtlz1_optimal_front_sums_to_half(nobj):
    result = mo.dtlz1(_point(nobj, 0.5), nobj)
    assert len(result.obj) == nobj
    assert sum(result.obj) == pytest.approx(0.5)
    assert result.constr == []


def test_dtlz1_away_from_front_is_larger():
    assert sum(mo.dtlz1(_point(3, 0.9), 3).obj) > 0.5


def test_dtlz1_inv_mirrors_dtlz1():
    x = _point(3, 0.7)
    plain = mo.dtlz1(x, 3).obj
    inv = mo.dtlz1_inv(x, 3).obj
    pairs = [a + b for a, b in zip(plain, inv)]
    assert all(p == pytest.approx(pairs[0]) for p in pairs)


@pytest.mark.parametrize("problem", [mo.dtlz2, mo.dtlz3, mo.dtlz4, mo.dtlz5])
def test_spherical_fronts_on_unit_sphere(problem):
    result = problem(_point(3, 0.5 if problem is not mo.dtlz5 else 0.0), 3)
    assert sum(f * f for f in result.obj) == pytest.approx(1.0)


def test_dtlz2_convex_relates_to_dtlz2():
    x = _point(3, 0.6)
    base = mo.dtlz2(x, 3).obj
    convex = mo.dtlz2_convex(x, 3).obj
    assert convex[0] == pytest.approx(base[0] ** 4)
    assert convex[2] == pytest.approx(base[2] ** 2)


def test_dtlz2_inv_is_below_top():
    x = _point(3, 0.5)
    inv = mo.dtlz2_inv(x, 3).obj
    assert all(v >= -1e-12 for v in inv)
    assert all(v <= 1.0 + 1e-12 for v in inv)


def test_dtlz2_constr_sign_inside_band():
    result = mo.dtlz2_constr(_point(2, 0.5, position=0.5), 2)
    last = result.obj[-1]
    assert 0.15 < last < 0.85
    assert result.constr[0] < 0


def test_dtlz6_copies_position_variables():
    x = [0.2, 0.4] + [0.0] * 6
    result = mo.dtlz6(x, 3)
    assert result.obj[:2] == x[:2]
    assert len(result.obj) == 3


def test_c1_dtlz1_boundary_is_zero():
    x = [1.0, 1.0] + [0.5] * 5
    result = mo.c1_dtlz1(x, 3)
    assert result.constr[0] == pytest.approx(0.0)


def test_c1_dtlz3_optimal_front_is_feasible_sign():
    result = mo.c1_dtlz3(_point(3, 0.5), 3)
    # Radius 1 lies inside the inner sphere of radius 4, both factors negative.
    assert result.constr[0] > 0


def test_c2_dtlz2_corner_is_feasible():
    x = [0.0, 0.0] + [0.5] * 5
    result = mo.c2_dtlz2(x, 3)
    assert result.obj[0] == pytest.approx(1.0)
    assert result.constr[0] == pytest.approx(0.5 * 0.5)


def test_dtlz1_hole_centre():
    x = [0.5] + [0.5] * 5
    result = mo.dtlz1_hole(x, 2)
    assert result.obj[0] == pytest.approx(result.obj[1])
    assert result.constr[0] == pytest.approx(0.2 * 0.2)


def test_c3_dtlz1_one_constraint_per_objective():
    x = [1.0] + [0.5] * 5
    result = mo.c3_dtlz1(x, 2)
    assert len(result.constr) == 2
    assert result.constr[1] == pytest.approx(0.0)


def test_c3_dtlz4_constraints():
    x = [0.0, 0.0] + [0.5] * 5
    result = mo.c3_dtlz4(x, 3)
    assert len(result.constr) == 3
    assert result.constr[1] == pytest.approx(0.0)


def test_dtlz_rejects_bad_objective_count():
    with pytest.raises(ValueError):
        mo.dtlz1([0.5, 0.5], 0)
    with pytest.raises(ValueError):
        mo.dtlz2([0.5], 4)


def test_crash_at_origin():
    result = mo.crash([0.0] * 5)
    assert result.obj == pytest.approx([1640.2823, 6.5856, -0.0551])


def test_machining_at_origin():
    result = mo.machining([0.0, 0.0, 0.0])
    assert result.obj == pytest.approx([7.49, 4.13, -21.90, 11.331])
    assert result.constr == pytest.approx([-3.1725, -8.0420, 18.4988])


def test_car_shapes_and_values():
    result = mo.car([0.0] * 7)
    assert len(result.obj) == 3
    assert len(result.constr) == 10
    assert result.obj[0] == pytest.approx(1.98)
    assert result.obj[1] == pytest.approx(4.72)


def test_welded_beam_constraint_and_deflection():
    result = mo.welded_beam([0.5, 2.0, 1.0, 1.0])
    assert result.obj[1] == pytest.approx(2.1952)
    assert result.constr[2] == pytest.approx(1.0 - 0.5)
    assert len(result.constr) == 4


def test_water_dimensions_and_proportion():
    result = mo.water([0.5, 0.3, 0.04])
    assert len(result.obj) == 5
    assert len(result.constr) == 7
    assert result.obj[1] / 0.5 == pytest.approx(3000.0 / 1500.0)


def test_wiper_paired_constraints():
    result = mo.wiper([100.0, 0.3, 1.0])
    c = result.constr
    assert c[0] + c[1] == pytest.approx(-(0.2 - 0.8))
    assert c[2] + c[3] == pytest.approx(-(1.0 - 4.0))
    assert result.obj[2] >= 0
    assert all(math.isfinite(v) for v in result.obj)


def test_fixed_size_problems_reject_short_input():
    with pytest.raises(ValueError):
        mo.crash([0.0, 0.0])
    with pytest.raises(ValueError):
        mo.car([0.0] * 6)
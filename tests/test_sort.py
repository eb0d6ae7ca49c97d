from castopt.individual import Individual
from castopt.rand import RandomGenerator
from castopt.sort import quicksort_dist, quicksort_front_obj


def _population():
    objs = [(3.0, 1.0), (1.0, 5.0), (2.0, 2.0), (1.0, 0.5), (9.0, 4.0), (0.5, 3.0)]
    return [Individual(obj=list(o), crowd_dist=o[1] * 2) for o in objs]


def test_sort_by_first_objective():
    pop = _population()
    indices = [0, 1, 2, 3, 4, 5]
    quicksort_front_obj(pop, 0, indices, RandomGenerator(0.4))
    values = [pop[i].obj[0] for i in indices]
    assert values == sorted(values)
    assert sorted(indices) == [0, 1, 2, 3, 4, 5]


def test_sort_by_second_objective_subset():
    pop = _population()
    indices = [4, 2, 0]
    quicksort_front_obj(pop, 1, indices, RandomGenerator(0.6))
    assert indices == [0, 2, 4]


def test_sort_by_crowding_distance():
    pop = _population()
    indices = [5, 4, 3, 2, 1, 0]
    quicksort_dist(pop, indices, RandomGenerator(0.2))
    values = [pop[i].crowd_dist for i in indices]
    assert values == sorted(values)
    assert sorted(indices) == list(range(6))


def test_trivial_lists_do_not_draw():
    pop = _population()
    rng = RandomGenerator(0.3)
    empty = []
    single = [2]
    quicksort_dist(pop, empty, rng)
    quicksort_front_obj(pop, 0, single, rng)
    assert empty == []
    assert single == [2]
    assert rng.jrand == 0
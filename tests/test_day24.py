import pytest

from advent2023.day24 import (
    Hail,
    Vector,
    intersections_xy,
    part_one,
    part_two,
    round_n,
    solve_system,
)

EXAMPLE = """19, 13, 30 @ -2,  1, -2
18, 19, 22 @ -1, -1, -2
20, 25, 34 @ -2, -2, -4
12, 31, 28 @ -1, -2, -1
20, 19, 15 @  1, -5, -3
"""


def _example_hail():
    return [Hail.parse(line) for line in EXAMPLE.splitlines()]


def test_example_intersections_in_area():
    points = intersections_xy(_example_hail())
    assert sum(1 for p in points if p is not None and p.contained_xy(7, 27)) == 2


def test_intersections_cover_every_pair():
    assert len(intersections_xy(_example_hail())) == 10


def test_part_one_example_outside_real_area():
    assert part_one(EXAMPLE) == 0


def test_part_two_example():
    assert part_two(EXAMPLE) == 47


def test_part_two_needs_three_hailstones():
    assert part_two("19, 13, 30 @ -2, 1, -2\n18, 19, 22 @ -1, -1, -2\n") is None


def test_parse():
    expected = Hail(p=Vector(19.0, 13.0, 30.0), v=Vector(-2.0, 1.0, -2.0))
    assert Hail.parse("19, 13, 30 @ -2,  1, -2") == expected


def test_parse_rejects_short_line():
    with pytest.raises(ValueError):
        Hail.parse("1, 2, 3 @ 4, 5")


def test_advance_time():
    hail = Hail(p=Vector(20.0, 19.0, 15.0), v=Vector(1.0, -5.0, -3.0))
    assert hail.position_at(1.0) == Vector(21.0, 14.0, 12.0)


def test_intersect_paths():
    a = Hail.parse("19, 13, 30 @ -2, 1, -2")
    b = Hail.parse("18, 19, 22 @ -1, -1, -2")
    assert a.intersect_xy(b) == Vector(14.333, 15.333, 0.0)

    a = Hail.parse("19, 13, 30 @ -2, 1, -2")
    b = Hail.parse("20, 25, 34 @ -2, -2, -4")
    assert a.intersect_xy(b) == Vector(11.667, 16.667, 0.0)


def test_parallel_paths_do_not_intersect():
    a = Hail.parse("18, 19, 22 @ -1, -1, -2")
    b = Hail.parse("20, 25, 34 @ -2, -2, -4")
    assert a.intersect_xy(b) is None


def test_intersection_in_the_past():
    a = Hail.parse("19, 13, 30 @ -2, 1, -2")
    b = Hail.parse("20, 19, 15 @ 1, -5, -3")
    assert a.intersect_xy(b) is None


def test_contained_xy_bounds_inclusive():
    assert Vector(7.0, 27.0, 99.0).contained_xy(7, 27)
    assert not Vector(6.9, 20.0, 0.0).contained_xy(7, 27)
    assert not Vector(10.0, 27.1, 0.0).contained_xy(7, 27)


def test_round_n():
    assert round_n(2.5, 0) == 3.0
    assert round_n(-2.5, 0) == -3.0
    assert round_n(1.23456, 2) == 1.23
    assert round_n(14.33333, 3) == 14.333


def test_solve_system():
    solution = solve_system([[2.0, 0.0], [0.0, 4.0]], [2.0, 8.0])
    assert solution == pytest.approx([1.0, 2.0])


def test_solve_system_with_pivoting():
    solution = solve_system([[0.0, 1.0], [1.0, 1.0]], [3.0, 5.0])
    assert solution == pytest.approx([2.0, 3.0])


def test_solve_system_singular():
    assert solve_system([[1.0, 2.0], [0.0, 0.0]], [1.0, 0.0]) is None


def test_solve_system_does_not_mutate_inputs():
    a = [[0.0, 1.0], [1.0, 1.0]]
    c = [3.0, 5.0]
    solve_system(a, c)
    assert a == [[0.0, 1.0], [1.0, 1.0]]
    assert c == [3.0, 5.0]
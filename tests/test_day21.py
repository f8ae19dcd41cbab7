import pytest

from advent2023.day21 import (
    parse_bounds,
    parse_input,
    part_one,
    part_two,
    reachable_count,
)

EXAMPLE = """...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
"""

OPEN_GRID = "...\n.S.\n...\n"


def example():
    walls, start = parse_input(EXAMPLE)
    return walls, start, len(EXAMPLE.splitlines())


def test_part_one_example_six_steps():
    walls, start, size = example()
    assert reachable_count(walls, start, 6, size) == 16


@pytest.mark.parametrize("steps, expected", [(0, 1), (10, 50), (50, 1594)])
def test_reachable_on_repeating_map(steps, expected):
    walls, start, size = example()
    assert reachable_count(walls, start, steps, size) == expected


def test_parse_input():
    walls, start = parse_input(EXAMPLE)
    assert start == (5, 5)
    assert {(5, 1), (6, 1), (7, 1), (9, 1)} <= walls
    assert (5, 5) not in walls
    assert (0, 0) not in walls


def test_parse_bounds():
    assert parse_bounds(EXAMPLE) == (11, 11)
    assert parse_bounds("....\n....\n") == (2, 4)


def test_parse_bounds_empty_raises():
    with pytest.raises(ValueError):
        parse_bounds("")


def test_part_one_open_grid():
    assert part_one(OPEN_GRID) == 65 * 65


def test_part_two_open_grid():
    assert part_two(OPEN_GRID) == 26_501_366**2


def test_part_two_requires_square_map():
    with pytest.raises(ValueError):
        part_two("....\n.S..\n....\n")


def test_part_two_requires_odd_size():
    with pytest.raises(ValueError):
        part_two("....\n.S..\n....\n....\n")
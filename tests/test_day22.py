import dataclasses

import pytest

from advent2023.day22 import (
    Brick,
    Coord,
    build_structures,
    chain_reactions,
    parse_bricks,
    part_one,
    part_two,
    removable_bricks,
    settle_bricks,
)

EXAMPLE = """1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9
"""


def _example_structures():
    return build_structures(settle_bricks(parse_bricks(EXAMPLE)))


def test_part_one():
    assert part_one(EXAMPLE) == 5


def test_part_two():
    assert part_two(EXAMPLE) == 7


def test_brick_area():
    brick = Brick(0, Coord(0, 0, 0), Coord(0, 0, 0))
    assert brick.area() == 1
    brick = dataclasses.replace(brick, b=Coord(0, 0, 9))
    assert brick.area() == 10
    brick = dataclasses.replace(brick, b=Coord(1, 0, 9))
    assert brick.area() == 20
    brick = dataclasses.replace(brick, b=Coord(1, 2, 9))
    assert brick.area() == 60


def test_coord_parse():
    assert Coord.parse("1, 2, 3") == Coord(1, 2, 3)


def test_coord_parse_rejects_zero_z():
    with pytest.raises(ValueError):
        Coord.parse("1,2,0")


def test_brick_parse():
    brick = Brick.parse("0,0,2~2,0,2", 4)
    assert brick == Brick(4, Coord(0, 0, 2), Coord(2, 0, 2))


def test_brick_parse_requires_tilde():
    with pytest.raises(ValueError):
        Brick.parse("0,0,2 2,0,2")


def test_below_and_above():
    brick = Brick(1, Coord(0, 0, 3), Coord(0, 0, 4))
    assert brick.below() == Brick(1, Coord(0, 0, 2), Coord(0, 0, 3))
    assert brick.above() == Brick(1, Coord(0, 0, 4), Coord(0, 0, 5))


def test_overlaps():
    first = Brick(0, Coord(0, 0, 1), Coord(2, 0, 1))
    crossing = Brick(1, Coord(1, 0, 1), Coord(1, 2, 1))
    apart = Brick(2, Coord(0, 2, 1), Coord(2, 2, 1))
    higher = Brick(3, Coord(1, 0, 2), Coord(1, 2, 2))
    assert first.overlaps(crossing)
    assert not first.overlaps(apart)
    assert not first.overlaps(higher)


def test_single_brick_falls_to_ground():
    settled = settle_bricks([Brick(0, Coord(0, 0, 5), Coord(0, 0, 7))])
    assert settled == [Brick(0, Coord(0, 0, 1), Coord(0, 0, 3))]


def test_brick_lands_on_another():
    bricks = [
        Brick(0, Coord(0, 0, 10), Coord(0, 0, 10)),
        Brick(1, Coord(0, 0, 3), Coord(2, 0, 3)),
    ]
    settled = {brick.id: brick for brick in settle_bricks(bricks)}
    assert settled[1].min_z == 1
    assert settled[0].min_z == 2


def test_example_supports():
    structures = _example_structures()
    assert sorted(structures[0].supporting) == [1, 2]
    assert sorted(structures[3].supported_by) == [1, 2]
    assert structures[0].supported_by == []
    assert structures[6].supported_by == [5]


def test_example_removable():
    assert set(removable_bricks(_example_structures())) == {1, 2, 3, 4, 6}


def test_example_chain_reactions():
    structures = _example_structures()
    counts = chain_reactions(structures, removable_bricks(structures))
    assert sorted(counts) == [1, 6]


def test_settling_preserves_ids_and_sizes():
    bricks = parse_bricks(EXAMPLE)
    settled = settle_bricks(bricks)
    assert sorted(brick.id for brick in settled) == list(range(7))
    original = {brick.id: brick.area() for brick in bricks}
    assert {brick.id: brick.area() for brick in settled} == original
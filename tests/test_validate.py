import pytest

from solong.mapfile import MapError
from solong.validate import (
    all_reachable,
    check_components,
    check_walls,
    find_player,
    flood_fill,
    validate_map,
)

VALID = ["1111111", "1P0C0E1", "1000001", "1111111"]
BLOCKED = ["11111", "1P1C1", "1E111", "11111"]


def test_find_player_points_at_player():
    x, y = find_player(VALID)
    assert VALID[y][x] == "P"


def test_find_player_none_when_absent():
    assert find_player(["111", "101", "111"]) is None


def test_walls_valid():
    assert check_walls(VALID)


def test_walls_hole_in_top_row():
    grid = ["1101111"] + VALID[1:]
    assert not check_walls(grid)


def test_walls_hole_in_side():
    grid = [VALID[0], "0P0C0E1", VALID[2], VALID[3]]
    assert not check_walls(grid)


def test_walls_ragged_row():
    grid = [VALID[0], "1P0C0E01", VALID[2], VALID[3]]
    assert not check_walls(grid)


@pytest.mark.parametrize("grid", [["111", "1P1"], ["11", "1P", "11"], []])
def test_walls_too_small(grid):
    assert not check_walls(grid)


def test_components_valid():
    assert check_components(VALID)


@pytest.mark.parametrize(
    "middle",
    ["1P0P0E1", "1P000E1", "1P0CEE1", "100C0E1", "1P0C001"],
)
def test_components_invalid(middle):
    grid = [VALID[0], middle, VALID[2], VALID[3]]
    assert not check_components(grid)


def test_flood_fill_marks_every_open_tile():
    filled = flood_fill(VALID, find_player(VALID))
    for before, after in zip(VALID, filled):
        for old, new in zip(before, after):
            assert new == ("1" if old == "1" else "F")


def test_flood_fill_leaves_input_untouched():
    copy = list(VALID)
    flood_fill(VALID, find_player(VALID))
    assert VALID == copy


def test_flood_fill_stops_at_barrier():
    filled = flood_fill(BLOCKED, find_player(BLOCKED))
    assert filled[1][3] == BLOCKED[1][3]
    assert filled[2][1] == "F"


def test_flood_fill_outside_start_changes_nothing():
    assert flood_fill(VALID, (-1, -1)) == VALID


def test_all_reachable():
    assert all_reachable(VALID)
    assert not all_reachable(BLOCKED)


def test_all_reachable_needs_player():
    with pytest.raises(ValueError):
        all_reachable(["111", "1C1", "111"])


def test_validate_map_returns_rows():
    assert validate_map(tuple(VALID)) == VALID


def test_validate_map_rejects_open_border():
    with pytest.raises(MapError, match="walls"):
        validate_map(["0111111"] + VALID[1:])


def test_validate_map_rejects_missing_exit():
    with pytest.raises(MapError, match="exit"):
        validate_map([VALID[0], "1P0C001", VALID[2], VALID[3]])


def test_validate_map_rejects_unreachable():
    with pytest.raises(MapError, match="reached"):
        validate_map(BLOCKED)
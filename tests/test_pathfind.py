import pytest

from hobbykit.pathfind import DEFAULT_MAP, Grid, PathResult, Waypoint, distance_map, find_path


def _adjacent(a, b, directions):
    dx, dy = abs(a.x - b.x), abs(a.y - b.y)
    if directions == 4:
        return dx + dy == 1
    return max(dx, dy) == 1


def test_grid_blocked_and_outside():
    grid = Grid(DEFAULT_MAP)
    assert grid.is_blocked(1, 2)
    assert not grid.is_blocked(0, 0)
    assert grid.is_blocked(-1, 0)
    assert grid.is_blocked(0, 8)
    assert not grid.is_inside(8, 0)
    assert grid.is_inside(7, 7)


def test_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Grid(["...", ".."])


def test_grid_rejects_unknown_cells():
    with pytest.raises(ValueError):
        Grid(["..x"])


def test_distance_map_start_is_zero_and_walls_absent():
    grid = Grid(DEFAULT_MAP)
    done = distance_map(grid, (4, 4))
    assert done[(4, 4)] == 0
    assert all(not grid.is_blocked(x, y) for (x, y) in done if (x, y) != (4, 4))


def test_open_grid_distances():
    grid = Grid(["...", "...", "..."])
    assert distance_map(grid, (0, 0), 4)[(2, 2)] == 4
    assert distance_map(grid, (0, 0), 8)[(2, 2)] == 2


@pytest.mark.parametrize("directions", [4, 8])
def test_default_path_is_consistent(directions):
    grid = Grid(DEFAULT_MAP)
    result = find_path(grid, (4, 4), (0, 7), directions)
    path = result.waypoints
    assert (path[0].x, path[0].y, path[0].distance) == (4, 4, 0)
    assert (path[-1].x, path[-1].y) == (0, 7)
    assert path[-1].distance == result.distances[(0, 7)]
    assert len(path) == path[-1].distance + 1
    for before, after in zip(path, path[1:]):
        assert after.distance == before.distance + 1
        assert _adjacent(before, after, directions)
    assert all(not grid.is_blocked(w.x, w.y) for w in path)


def test_eight_directions_never_longer():
    grid = Grid(DEFAULT_MAP)
    four = find_path(grid, (4, 4), (0, 7), 4)
    eight = find_path(grid, (4, 4), (0, 7), 8)
    assert eight.waypoints[-1].distance <= four.waypoints[-1].distance


def test_start_equals_target():
    result = find_path(Grid(DEFAULT_MAP), (0, 0), (0, 0))
    assert result.waypoints == [Waypoint(0, 0, 0)]


def test_unreachable_target_raises():
    grid = Grid([".#.", ".#.", ".#."])
    with pytest.raises(ValueError):
        find_path(grid, (0, 0), (2, 2))


def test_blocked_target_raises():
    with pytest.raises(ValueError):
        find_path(Grid(DEFAULT_MAP), (4, 4), (1, 2))


def test_invalid_directions_raise():
    with pytest.raises(ValueError):
        distance_map(Grid(DEFAULT_MAP), (0, 0), 6)


def test_render_layout():
    grid = Grid(DEFAULT_MAP)
    result = find_path(grid, (4, 4), (0, 7))
    lines = result.render().splitlines()
    assert len(lines) == 8
    assert all(len(line) == 24 for line in lines)
    assert lines[2][3:6] == "  #"
    assert lines[7][0:3] == "  X"
    marked = sum(line.count("X") for line in lines)
    assert marked == len(result.waypoints) - 1
    assert lines[4][12:15] == f"{0:3d}"


def test_render_without_path_shows_distances():
    grid = Grid(["..", ".."])
    result = PathResult(grid, distance_map(grid, (0, 0)))
    assert result.render() == "  0  1\n  1  2\n"
# tests/test_pathfinding.py
import pytest

from conftest import make_grid, run_to_end
from algoviz.core.astar import AStarAlgo, manhattan
from algoviz.core.bfs import BFSAlgo
from algoviz.core.dfs import DFSAlgo
from algoviz.core.dijkstra import DijkstraAlgo
from algoviz.core.pseudocode import PSEUDOCODE
from algoviz.core.types import CellType

ENGINES = [BFSAlgo, DFSAlgo, DijkstraAlgo, AStarAlgo]


def _search(cls, grid, diagonal=False):
    engine = cls(diagonal=diagonal)
    engine.init(grid)
    assert engine.start()
    run_to_end(engine)
    return engine


def _assert_valid_path(grid, engine, diagonal=False):
    path = engine.path
    assert path[-1] is grid.end
    assert grid.start not in path
    prev = grid.start
    for cell in path:
        dr, dc = abs(cell.row - prev.row), abs(cell.col - prev.col)
        assert (dr, dc) in ((0, 1), (1, 0)) or (diagonal and (dr, dc) == (1, 1))
        assert cell.type in (CellType.PATH, CellType.END)
        prev = cell


@pytest.mark.parametrize("cls", ENGINES)
def test_finds_path_on_open_grid(cls):
    grid = make_grid(5, 5, start=(0, 0), end=(4, 4))
    engine = _search(cls, grid)
    assert engine.is_complete
    assert not engine.no_path_exists
    assert not engine.is_searching
    _assert_valid_path(grid, engine)
    assert engine.path_cost == len(engine.path)


def test_bfs_and_dijkstra_agree_on_minimal_cost():
    walls = [(1, 1), (1, 2), (1, 3), (3, 1), (3, 2), (3, 3)]
    bfs = _search(BFSAlgo, make_grid(5, 5, start=(0, 0), end=(4, 4), walls=walls))
    dij = _search(DijkstraAlgo, make_grid(5, 5, start=(0, 0), end=(4, 4), walls=walls))
    ast = _search(AStarAlgo, make_grid(5, 5, start=(0, 0), end=(4, 4), walls=walls))
    assert bfs.path_cost == dij.path_cost == ast.path_cost == 8


@pytest.mark.parametrize("cls", ENGINES)
def test_wall_barrier_means_no_path(cls):
    walls = [(r, 2) for r in range(5)]
    grid = make_grid(5, 5, start=(2, 0), end=(2, 4), walls=walls)
    engine = _search(cls, grid)
    assert engine.is_complete
    assert engine.no_path_exists
    assert engine.path == []
    assert engine.path_cost == 0
    assert grid.count(CellType.PATH) == 0


@pytest.mark.parametrize("cls", [DijkstraAlgo, AStarAlgo])
def test_weighted_search_detours_around_mud(cls):
    grid = make_grid(3, 3, start=(1, 0), end=(1, 2), weights=[(1, 1)])
    engine = _search(cls, grid)
    assert engine.path_cost == 4
    assert grid.cell(1, 1) not in engine.path


@pytest.mark.parametrize("cls", [DijkstraAlgo, AStarAlgo])
def test_weighted_search_pays_for_unavoidable_mud(cls):
    grid = make_grid(1, 3, start=(0, 0), end=(0, 2), weights=[(0, 1)])
    engine = _search(cls, grid)
    assert not engine.no_path_exists
    assert engine.path_cost == 6


@pytest.mark.parametrize("cls", [BFSAlgo, DFSAlgo])
def test_unweighted_search_cannot_enter_mud(cls):
    grid = make_grid(1, 3, start=(0, 0), end=(0, 2), weights=[(0, 1)])
    engine = _search(cls, grid)
    assert engine.no_path_exists


def test_weights_survive_a_search():
    grid = make_grid(3, 3, start=(1, 0), end=(1, 2), weights=[(1, 1), (0, 1)])
    _search(DijkstraAlgo, grid)
    grid.clear_path()
    assert grid.cell(1, 1).type is CellType.WEIGHT
    assert grid.cell(0, 1).type is CellType.WEIGHT


def test_bfs_stops_when_end_is_a_neighbour():
    grid = make_grid(1, 4, start=(0, 0), end=(0, 3))
    bfs = _search(BFSAlgo, grid)
    assert bfs.nodes_visited == 3
    assert bfs.current_line == 7
    dij = _search(DijkstraAlgo, make_grid(1, 4, start=(0, 0), end=(0, 3)))
    assert dij.nodes_visited == 4


@pytest.mark.parametrize("cls, visited", [
    (BFSAlgo, 1), (DFSAlgo, 1), (DijkstraAlgo, 2), (AStarAlgo, 2)])
def test_adjacent_start_and_end(cls, visited):
    grid = make_grid(1, 2, start=(0, 0), end=(0, 1))
    engine = _search(cls, grid)
    assert engine.nodes_visited == visited
    assert engine.path_cost == 1
    assert engine.path == [grid.end]


def test_dfs_pushes_duplicates():
    grid = make_grid(3, 3, start=(0, 0), end=(2, 0))
    dfs = DFSAlgo()
    dfs.init(grid)
    dfs.start()
    for _ in range(4):
        dfs.step()
    # (1,1) was pushed from (0,1) and again from (1,2)
    assert [c.coord for c in dfs.stack] == [(1, 0), (1, 1), (2, 2), (1, 1)]
    run_to_end(dfs)
    assert not dfs.no_path_exists
    _assert_valid_path(grid, dfs)


def test_diagonal_moves_shorten_path():
    grid = make_grid(3, 3, start=(0, 0), end=(2, 2))
    bfs = _search(BFSAlgo, grid, diagonal=True)
    assert bfs.path_cost == 2
    assert [c.coord for c in bfs.path] == [(1, 1), (2, 2)]
    _assert_valid_path(grid, bfs, diagonal=True)


@pytest.mark.parametrize("cls", ENGINES)
def test_start_needs_both_endpoints(cls):
    grid = make_grid(3, 3, start=(0, 0))
    engine = cls()
    engine.init(grid)
    assert not engine.start()
    assert not engine.is_searching
    engine.step()
    assert engine.nodes_visited == 0


@pytest.mark.parametrize("cls", ENGINES)
def test_step_before_start_and_after_finish_is_noop(cls):
    grid = make_grid(4, 4, start=(0, 0), end=(3, 3))
    engine = cls()
    engine.init(grid)
    engine.step()
    assert engine.nodes_visited == 0
    assert grid.count(CellType.VISITED) == 0

    assert engine.start()
    run_to_end(engine)
    visited = engine.nodes_visited
    engine.step()
    assert engine.nodes_visited == visited


@pytest.mark.parametrize("cls", ENGINES)
def test_restart_clears_previous_overlay(cls):
    grid = make_grid(4, 4, start=(0, 0), end=(3, 3))
    engine = _search(cls, grid)
    assert grid.count(CellType.PATH) > 0
    assert engine.start()
    assert grid.count(CellType.PATH) == 0
    assert grid.count(CellType.VISITED) == 0
    assert engine.nodes_visited == 0


@pytest.mark.parametrize("cls", ENGINES)
def test_reset_is_idempotent(cls):
    grid = make_grid(4, 4, start=(0, 0), end=(3, 3))
    engine = _search(cls, grid)
    engine.reset()
    fresh = cls()
    fresh.init(grid)
    assert engine == fresh
    engine.reset()
    assert engine == fresh


@pytest.mark.parametrize("cls", ENGINES)
def test_live_path_follows_current_node(cls):
    grid = make_grid(6, 6, start=(0, 0), end=(5, 5))
    engine = cls()
    engine.init(grid)
    assert engine.live_path() == []
    engine.start()
    for _ in range(4):
        engine.step()
    trail = engine.live_path()
    if engine.current is grid.start:
        assert trail == []
    else:
        assert trail[-1] is engine.current
        first = trail[0]
        assert abs(first.row - 0) + abs(first.col - 0) == 1


@pytest.mark.parametrize("cls", ENGINES)
def test_current_line_within_listing(cls):
    walls = [(1, c) for c in range(5)]
    grid = make_grid(6, 6, start=(0, 0), end=(5, 5), walls=walls)
    engine = cls()
    engine.init(grid)
    engine.start()
    listing = PSEUDOCODE[engine.name]
    while not engine.is_done:
        engine.step()
        assert 0 <= engine.current_line < len(listing)


def test_manhattan():
    grid = make_grid(5, 5)
    assert manhattan(grid.cell(0, 0), grid.cell(3, 4)) == 7

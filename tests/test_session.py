# tests/test_session.py
import pytest

from algoviz.core.bubble_sort import BubbleSort
from algoviz.core.config import Settings
from algoviz.core.errors import ConfigError, GridError
from algoviz.core.quick_sort import QuickSort
from algoviz.core.registry import Algorithm
from algoviz.core.session import Mode, Tool, VisualizationSession
from algoviz.core.types import CellType


def _session(**overrides):
    # 5 x 10 grid keeps the searches short
    opts = dict(seed=3, grid_width=210, grid_height=105, cell_size=21)
    opts.update(overrides)
    return VisualizationSession(Settings(**opts))


def _run_until_stopped(session, limit=100_000):
    frames = 0
    while session.is_playing or session.is_generating_maze:
        session.tick(1 / 60)
        frames += 1
        assert frames <= limit
    return frames


def _pathfinding(algo="bfs"):
    session = _session()
    session.select(algo)
    assert session.place(0, 0, Tool.POINT)
    assert session.place(4, 9, Tool.POINT)
    return session


# -------------------- sorting --------------------

def test_defaults():
    session = _session()
    assert session.mode is Mode.SORTING
    assert isinstance(session.engine, BubbleSort)
    assert len(session.array) == 50
    assert all(10 <= v <= 400 for v in session.array)
    assert session.backup == session.array
    assert (session.grid.rows, session.grid.cols) == (5, 10)
    assert session.pseudocode[0] == "procedure bubbleSort(A)"


def test_engine_shares_the_array():
    session = _session()
    assert session.engine.arr is session.array


def test_array_size_is_clamped():
    session = _session()
    session.new_array(500)
    assert len(session.array) == 100
    session.new_array(1)
    assert len(session.array) == 10


def test_speed_is_clamped():
    session = _session()
    assert session.set_speed(1.0) == 1.0
    assert session.adjust_speed(10) == 5.0
    assert session.adjust_speed(-10) == 0.25


def test_fast_speed_runs_several_steps_per_frame():
    session = _session(speed=3.0)
    assert session.play()
    assert session.tick(1 / 60) == 3
    assert session.engine.comparisons == 3


def test_slow_speed_waits_between_steps():
    session = _session(speed=0.25)
    assert session.play()
    # one step every (1/60) / 0.25 seconds
    assert [session.tick(0.02) for _ in range(4)] == [0, 0, 0, 1]


def test_paused_session_does_not_step():
    session = _session()
    assert session.tick(1 / 60) == 0
    assert session.engine.comparisons == 0


def test_sort_to_completion():
    session = _session(speed=5.0)
    assert session.play()
    _run_until_stopped(session)
    assert session.array == sorted(session.backup)
    assert session.is_done
    assert session.status == "Sorting complete!"
    assert not session.play()


def test_step_once_pauses():
    session = _session()
    session.play()
    session.step_once()
    assert not session.is_playing
    assert session.engine.comparisons == 1


def test_reset_restores_backup():
    session = _session(speed=5.0)
    session.play()
    _run_until_stopped(session)
    session.reset()
    assert session.array == session.backup
    assert not session.is_done
    assert session.engine.comparisons == 0


def test_select_restores_array():
    session = _session()
    for _ in range(30):
        session.step_once()
    session.select("quick")
    assert session.algorithm is Algorithm.QUICK
    assert isinstance(session.engine, QuickSort)
    assert session.array == session.backup
    assert session.engine.arr is session.array


def test_select_unknown_algorithm():
    session = _session()
    with pytest.raises(ConfigError):
        session.select("bogo")


def test_sorting_mode_ignores_grid_edits():
    session = _session()
    assert not session.place(0, 0, Tool.WALL)
    assert session.grid.count(CellType.WALL) == 0


# -------------------- pathfinding --------------------

def test_play_needs_start_and_end():
    session = _session()
    session.select("bfs")
    assert session.mode is Mode.PATHFINDING
    assert not session.play()
    assert session.status == "Place both Start and End nodes!"
    assert not session.is_playing


def test_point_tool_places_start_then_end():
    session = _pathfinding()
    assert session.grid.start.coord == (0, 0)
    assert session.grid.end.coord == (4, 9)
    assert not session.place(2, 2, Tool.POINT)


def test_tools_need_empty_cell():
    session = _pathfinding()
    assert not session.place(0, 0, Tool.WALL)
    assert session.place(2, 2, Tool.WALL)
    assert not session.place(2, 2, Tool.WALL)
    assert session.place(2, 2, Tool.ERASE)
    assert not session.place(2, 2, Tool.ERASE)
    assert session.place(0, 0, Tool.ERASE)
    assert session.grid.start is None


def test_place_out_of_range():
    session = _pathfinding()
    with pytest.raises(GridError):
        session.place(5, 0, Tool.WALL)


def test_search_to_completion():
    session = _pathfinding()
    assert session.play()
    _run_until_stopped(session)
    assert session.status == "Path found!"
    assert session.metrics()["path_cost"] == 13


def test_search_reports_no_path():
    session = _pathfinding()
    for r in range(5):
        session.place(r, 5, Tool.WALL)
    assert session.play()
    _run_until_stopped(session)
    assert session.status == "No path found!"


def test_no_edits_while_playing():
    session = _pathfinding()
    session.play()
    assert not session.place(2, 2, Tool.WALL)


def test_edit_after_run_clears_path():
    session = _pathfinding()
    session.play()
    _run_until_stopped(session)
    assert session.grid.count(CellType.PATH) > 0
    # searched cells are no longer Empty, so only erase applies
    assert not session.place(0, 1, Tool.WALL)
    assert session.place(4, 9, Tool.ERASE)
    assert session.grid.end is None
    assert session.grid.count(CellType.PATH) == 0
    assert session.grid.count(CellType.VISITED) == 0
    assert not session.is_done


def test_weights_only_for_weighted_searches():
    session = _pathfinding("bfs")
    assert not session.place(2, 2, Tool.WEIGHT)
    session.select("dijkstra")
    assert session.place(2, 2, Tool.WEIGHT)
    assert session.grid.cell(2, 2).cost == 5
    session.select("astar")
    assert session.grid.count(CellType.WEIGHT) == 1
    session.select("dfs")
    assert session.grid.count(CellType.WEIGHT) == 0


def test_diagonal_toggle_rebinds_engine():
    session = _pathfinding()
    session.set_diagonal(True)
    assert session.engine.diagonal
    session.play()
    _run_until_stopped(session)
    assert session.metrics()["path_cost"] == 9


def test_maze_generation():
    session = _session()
    session.select("bfs")
    session.generate_maze()
    assert session.is_generating_maze
    assert not session.place(1, 1, Tool.WALL)
    assert not session.play()
    _run_until_stopped(session)
    assert not session.is_generating_maze
    assert session.status == "Maze generated. Place Start/End."
    assert session.grid.count(CellType.WALL) > 0
    assert session.grid.count(CellType.VISITED) == 0


def test_clear_maze_keeps_endpoints():
    session = _pathfinding()
    session.place(2, 2, Tool.WALL)
    session.clear_maze()
    assert session.grid.count(CellType.WALL) == 0
    assert session.grid.start is not None and session.grid.end is not None


def test_reset_clears_grid():
    session = _pathfinding()
    session.place(2, 2, Tool.WALL)
    session.reset()
    assert session.grid.start is None
    assert session.grid.count(CellType.EMPTY) == len(session.grid)

# algoviz/core/session.py
#!/usr/bin/env python3
"""
VisualizationSession: the one object the viewer talks to.

It owns the shared array, its unsorted backup, the grid, the active engine and
the maze generator, plus play/pause and speed. The viewer calls `tick(dt)`
once per frame and routes user input to the methods below. Nothing here draws.

Single owner: engines, array and grid are only touched through this object,
from one thread.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Union

from algoviz.core.config import MAX_ARRAY_SIZE, MAX_SPEED, MIN_ARRAY_SIZE, MIN_SPEED, Settings
from algoviz.core.grid import Grid
from algoviz.core.maze import MazeGenerator
from algoviz.core.pseudocode import lines_for
from algoviz.core.registry import Algorithm, Engine, make_engine, parse_algorithm
from algoviz.core.search_base import SearchAlgo
from algoviz.core.types import CellType

logger = logging.getLogger(__name__)


class Mode(Enum):
    SORTING = "sorting"
    PATHFINDING = "pathfinding"


class Tool(Enum):
    POINT = "point"    # Start first, then End
    WALL = "wall"
    WEIGHT = "weight"
    ERASE = "erase"


class VisualizationSession:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.rng = random.Random(self.settings.seed)

        self.array: List[int] = []
        self.backup: List[int] = []
        self.grid = Grid.from_pixels(self.settings.grid_width, self.settings.grid_height,
                                     self.settings.cell_size)
        self.maze = MazeGenerator()
        self.maze.init(self.grid, seed=self.settings.seed)

        self.speed = self.settings.speed
        self.diagonal = self.settings.diagonal
        self.is_playing = False
        self.is_generating_maze = False
        self.status = "Welcome! Press SPACE to run."

        self._started = False
        self._since_step = 0.0

        self.algorithm = self.settings.algorithm
        self.engine: Engine = make_engine(self.algorithm)
        self.new_array(self.settings.array_size)
        self._bind_engine()

    # -------------------- state queries --------------------

    @property
    def mode(self) -> Mode:
        return Mode.SORTING if self.algorithm.is_sort else Mode.PATHFINDING

    @property
    def current_line(self) -> int:
        return self.engine.current_line

    @property
    def pseudocode(self) -> List[str]:
        return lines_for(self.algorithm.value)

    @property
    def is_done(self) -> bool:
        return self.engine.is_done

    def metrics(self) -> dict:
        m = self.engine.metrics()
        m["speed"] = self.speed
        m["playing"] = self.is_playing
        return m

    # -------------------- engine wiring --------------------

    def _bind_engine(self) -> None:
        if isinstance(self.engine, SearchAlgo):
            self.engine.diagonal = self.diagonal
            self.engine.init(self.grid)
        else:
            self.engine.init(self.array)
        self._started = False
        self._since_step = 0.0

    def select(self, algorithm: Union[str, Algorithm]) -> None:
        algo = parse_algorithm(algorithm)
        previous = self.algorithm
        self.is_playing = False
        self.grid.clear_path()
        if previous.is_weighted and not algo.is_weighted:
            self.grid.clear_weights()
        if self.backup:
            self.array[:] = self.backup
        self.algorithm = algo
        self.engine = make_engine(algo)
        self._bind_engine()
        self.status = f"Algorithm: {algo.value}"
        logger.info(f"selected {algo.value} ({self.mode.value})")

    # -------------------- array --------------------

    def new_array(self, size: Optional[int] = None) -> None:
        n = self.settings.array_size if size is None else size
        n = max(MIN_ARRAY_SIZE, min(MAX_ARRAY_SIZE, n))
        values = [self.rng.randint(self.settings.min_value, self.settings.max_value) for _ in range(n)]
        # keep the list object, engines hold a reference to it
        self.array[:] = values
        self.backup = list(values)
        self.is_playing = False
        if self.mode is Mode.SORTING:
            self._bind_engine()
        self.status = "Array generated."

    def restore_array(self) -> None:
        self.array[:] = self.backup
        self.is_playing = False
        if self.mode is Mode.SORTING:
            self._bind_engine()
        self.status = "Array reset."

    # -------------------- run control --------------------

    def play(self) -> bool:
        if self.is_generating_maze:
            self.status = "Wait for the maze to finish."
            return False
        if self.engine.is_done:
            self.status = "Already finished. Reset to run again."
            return False
        if self.mode is Mode.PATHFINDING and (self.grid.start is None or self.grid.end is None):
            self.status = "Place both Start and End nodes!"
            logger.warning("run refused: start or end cell missing")
            return False
        if not self._ensure_started():
            return False
        self.is_playing = True
        self.status = f"Running {self.algorithm.value}..."
        return True

    def pause(self) -> None:
        if self.is_playing:
            self.is_playing = False
            self.status = "Paused."

    def toggle(self) -> bool:
        if self.is_playing:
            self.pause()
            return False
        return self.play()

    def _ensure_started(self) -> bool:
        if self._started:
            return True
        if not self.engine.start():
            self.status = "Place both Start and End nodes!"
            return False
        self._started = True
        self._since_step = 0.0
        logger.info(f"{self.algorithm.value}: run started")
        return True

    def step_once(self) -> None:
        """Single-step while paused."""
        self.is_playing = False
        if self.engine.is_done or self.is_generating_maze:
            return
        if self.mode is Mode.PATHFINDING and (self.grid.start is None or self.grid.end is None):
            self.status = "Place both Start and End nodes!"
            return
        if self._ensure_started():
            self._run_step()

    def _run_step(self) -> None:
        self.engine.step()
        if not self.engine.is_done:
            return
        self.is_playing = False
        if self.mode is Mode.SORTING:
            self.status = "Sorting complete!"
        elif self.engine.no_path_exists:
            self.status = "No path found!"
        else:
            self.status = "Path found!"
        logger.info(f"{self.algorithm.value}: {self.status} {self.engine.metrics()}")

    def tick(self, dt: float) -> int:
        """
        Advance one frame; returns how many engine steps ran.

        Below 1x speed one step runs every (1/fps)/speed seconds. At 1x and
        above int(speed) steps run per frame.
        """
        if self.is_generating_maze:
            self._tick_maze()

        if not self.is_playing:
            return 0

        ran = 0
        if self.speed < 1.0:
            self._since_step += dt
            if self._since_step >= (1.0 / self.settings.fps) / self.speed:
                self._run_step()
                self._since_step = 0.0
                ran = 1
        else:
            for _ in range(int(self.speed)):
                if not self.is_playing:
                    break
                self._run_step()
                ran += 1
        return ran

    def set_speed(self, speed: float) -> float:
        self.speed = max(MIN_SPEED, min(MAX_SPEED, speed))
        return self.speed

    def adjust_speed(self, delta: float) -> float:
        return self.set_speed(self.speed + delta)

    def reset(self) -> None:
        self.is_playing = False
        if self.mode is Mode.SORTING:
            self.restore_array()
            self.status = "Array reset."
        else:
            self.is_generating_maze = False
            self.maze.reset()
            self.grid.reset()
            self._bind_engine()
            self.status = "Grid reset. Place Start and End."

    # -------------------- grid editing --------------------

    def _stop_search(self) -> None:
        self.is_playing = False
        if self.mode is Mode.PATHFINDING:
            self._bind_engine()

    def set_diagonal(self, enabled: bool) -> None:
        self.diagonal = enabled
        self.grid.clear_path()
        self._stop_search()
        self.status = "Settings changed."

    def clear_path(self) -> None:
        self.grid.clear_path()
        self._stop_search()
        self.status = "Path cleared."

    def clear_walls(self) -> None:
        self.grid.clear_walls()
        self._stop_search()
        self.status = "Walls cleared."

    def clear_maze(self) -> None:
        self.is_generating_maze = False
        self.maze.reset()
        self.grid.clear_maze()
        self._stop_search()
        self.status = "Maze cleared. Ready for new search."

    def generate_maze(self) -> None:
        self._stop_search()
        self.maze.begin()
        self.is_generating_maze = True
        self.status = "Generating maze..."
        logger.info(f"maze: generating on {self.grid.rows}x{self.grid.cols} grid")

    def _tick_maze(self) -> None:
        for _ in range(self.settings.maze_steps_per_frame):
            if not self.maze.is_generating:
                break
            self.maze.step()
        if not self.maze.is_generating:
            self.is_generating_maze = False
            self.grid.finalize_maze()
            self.status = "Maze generated. Place Start/End."

    def place(self, row: int, col: int, tool: Tool) -> bool:
        """Apply one mouse edit; False if the edit is not allowed right now."""
        cell = self.grid.cell(row, col)
        if self.mode is not Mode.PATHFINDING or self.is_playing or self.is_generating_maze:
            return False

        if tool is Tool.ERASE:
            if cell.type is CellType.EMPTY:
                return False
            self.grid.set_cell_type(row, col, CellType.EMPTY)
            self._after_edit()
            return True

        if cell.type is not CellType.EMPTY:
            return False
        if tool is Tool.POINT:
            if self.grid.start is None:
                self.grid.set_cell_type(row, col, CellType.START)
            elif self.grid.end is None:
                self.grid.set_cell_type(row, col, CellType.END)
            else:
                return False
        elif tool is Tool.WALL:
            self.grid.set_cell_type(row, col, CellType.WALL)
        elif tool is Tool.WEIGHT:
            if not self.algorithm.is_weighted:
                self.status = "Weights need A* Search or Dijkstra."
                return False
            self.grid.set_cell_type(row, col, CellType.WEIGHT)
        self._after_edit()
        return True

    def _after_edit(self) -> None:
        # a finished or paused run no longer matches the grid
        if self._started:
            self.grid.clear_path()
            self._bind_engine()

# algoviz/app/viewer.py
#!/usr/bin/env python3
"""
Algorithm Visualizer Viewer: Bars / Grid + Metrics + Pseudocode

- Keyboard:
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset (restore the array / clear the grid)
    [+]/[-]      -> speed (0.25x .. 5x)
    [A]          -> new random array (sorting)
    [G]          -> generate maze (pathfinding)
    [C]          -> clear path
    [X]          -> clear maze
    [D]          -> toggle diagonal moves
    [P]          -> toggle pseudocode panel
    [Q]/[ESC]    -> quit

- Mouse (pathfinding):
    left click         -> place Start, then End
    SHIFT + left drag  -> walls
    W + left drag      -> weights (A* Search / Dijkstra only)
    E + left drag      -> erase
    right drag         -> walls

Settings:
- ENV: ALGOVIZ_ALGORITHM=astar, ALGOVIZ_SPEED=2, ...
- CLI: --algorithm=astar --speed=2 --diagonal=on --seed=7 ...
"""

# --- bootstrap import path so `from algoviz...` works when run as a script ---
import sys, logging
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------

from typing import List, Optional, Tuple
import pygame

from algoviz.app import theme as THEME
from algoviz.core.config import Settings, load_settings
from algoviz.core.errors import VisualizerError
from algoviz.core.session import Mode, Tool, VisualizationSession
from algoviz.core.types import CellType

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font
SPEED_STEP = 0.25
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255, 255, 255, 20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0, 0))
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235, 238, 242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, session: VisualizationSession):
        pygame.init()

        self.session = session
        self.settings: Settings = session.settings
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 24)
        self.show_code = True

        win_w = self.settings.grid_width + GRID_MARGIN * 2 + PANEL_W
        win_h = max(self.settings.grid_height + GRID_MARGIN * 2, 640)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Algorithm Visualizer: {session.algorithm.value}")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        # aspect ratio to preserve visual integrity
        self._aspect = max(1e-6, win_w / win_h)
        self._min_w  = 800
        self._min_h  = int(self._min_w / self._aspect)

        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Integer cell size that fits the window; bars share the same canvas."""
        grid = self.session.grid
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        cs_by_w = avail_w // grid.cols
        cs_by_h = avail_h // grid.rows
        self.cell_size = int(max(6, min(cs_by_w, cs_by_h)))

        plate_w = grid.cols * self.cell_size + 2 * GRID_MARGIN
        plate_h = grid.rows * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - plate_h) // 2)
        self.canvas_rect = pygame.Rect(0, top_y, plate_w, plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)

        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _apply_aspect_resize(self, req_w: int, req_h: int):
        req_w = max(self._min_w, req_w)
        req_h = max(self._min_h, req_h)

        cand_h_from_w = int(round(req_w / self._aspect))
        cand_w_from_h = int(round(req_h * self._aspect))
        if abs(req_h - cand_h_from_w) <= abs(req_w - cand_w_from_h):
            new_w, new_h = req_w, cand_h_from_w
        else:
            new_w, new_h = cand_w_from_h, req_h

        self.screen = pygame.display.set_mode((new_w, new_h), pygame.RESIZABLE)
        self._layout(new_w, new_h)

    # ---------- loop ----------
    def run(self):
        while True:
            dt = self.clock.tick(self.settings.fps) / 1000.0
            self._handle_events()
            self._handle_paint()
            self.session.tick(dt)
            self._refresh_active_states()
            self._draw()

    def _quit(self):
        pygame.quit()
        sys.exit(0)

    def _handle_events(self):
        s = self.session
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._quit()
                elif e.key == pygame.K_SPACE:
                    s.toggle()
                elif e.key == pygame.K_n:
                    s.step_once()
                elif e.key == pygame.K_r:
                    s.reset()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    s.adjust_speed(+SPEED_STEP)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
                    s.adjust_speed(-SPEED_STEP)
                elif e.key == pygame.K_a and s.mode is Mode.SORTING:
                    s.new_array()
                elif e.key == pygame.K_g and s.mode is Mode.PATHFINDING:
                    s.generate_maze()
                elif e.key == pygame.K_c and s.mode is Mode.PATHFINDING:
                    s.clear_path()
                elif e.key == pygame.K_x and s.mode is Mode.PATHFINDING:
                    s.clear_maze()
                elif e.key == pygame.K_d:
                    s.set_diagonal(not s.diagonal)
                elif e.key == pygame.K_p:
                    self.show_code = not self.show_code
            elif e.type == pygame.VIDEORESIZE:
                self._apply_aspect_resize(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                consumed = False
                for b in self._buttons:
                    consumed = b.handle_mouse(e) or consumed
                if e.type == pygame.MOUSEBUTTONDOWN and not consumed:
                    self._handle_click(e)

    # ---------- grid editing ----------
    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        if pos[0] < ox or pos[1] < oy or not self.session.grid.is_valid(row, col):
            return None
        return row, col

    def _drag_tool(self, buttons, keys) -> Optional[Tool]:
        if buttons[2]:
            return Tool.WALL
        if buttons[1]:
            return Tool.ERASE
        if buttons[0]:
            if keys[pygame.K_w]:
                return Tool.WEIGHT
            if keys[pygame.K_LSHIFT] or keys[pygame.K_RSHIFT]:
                return Tool.WALL
            if keys[pygame.K_e]:
                return Tool.ERASE
        return None

    def _handle_click(self, e: pygame.event.Event):
        if self.session.mode is not Mode.PATHFINDING or e.button != 1:
            return
        keys = pygame.key.get_pressed()
        if keys[pygame.K_w] or keys[pygame.K_LSHIFT] or keys[pygame.K_RSHIFT] or keys[pygame.K_e]:
            return  # painting is handled per frame
        rc = self._cell_at(e.pos)
        if rc is not None:
            self.session.place(rc[0], rc[1], Tool.POINT)

    def _handle_paint(self):
        """Held-button painting, checked once per frame."""
        if self.session.mode is not Mode.PATHFINDING:
            return
        tool = self._drag_tool(pygame.mouse.get_pressed(), pygame.key.get_pressed())
        if tool is None:
            return
        rc = self._cell_at(pygame.mouse.get_pos())
        if rc is not None:
            self.session.place(rc[0], rc[1], tool)

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        THEME.glass_panel(self.screen, self.canvas_rect.inflate(-4, -4))
        if self.session.mode is Mode.SORTING:
            self._draw_bars()
        else:
            self._draw_grid()
        if self.show_code:
            self._draw_pseudocode()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    # ---- bars ----
    def _draw_bars(self):
        s = self.session
        arr = s.array
        if not arr:
            return
        ox, oy = self._grid_origin
        area_w = self.canvas_rect.width - 2 * GRID_MARGIN
        area_h = self.canvas_rect.height - 2 * GRID_MARGIN
        slot = area_w / len(arr)
        bar_w = max(1, int(slot) - 2)
        top = max(self.settings.max_value, max(arr))
        engine = s.engine
        for i, v in enumerate(arr):
            h = max(1, int(area_h * v / top))
            rect = pygame.Rect(int(ox + i * slot), oy + area_h - h, bar_w, h)
            pygame.draw.rect(self.screen, THEME.bar_color(i, engine.marks, engine.settled), rect)
            pygame.draw.rect(self.screen, (50, 50, 50), rect, 1)

    # ---- grid ----
    def _draw_grid(self):
        s = self.session
        grid = s.grid
        cs = self.cell_size
        ox, oy = self._grid_origin
        for cell in grid.cells:
            rect = pygame.Rect(ox + cell.col * cs, oy + cell.row * cs, cs, cs)
            pygame.draw.rect(self.screen, THEME.cell_color(cell), rect)
            pygame.draw.rect(self.screen, THEME.GRID_LINE, rect, 1)

        # live path overlay while a search is in flight
        engine = s.engine
        if getattr(engine, "is_searching", False):
            overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
            overlay.fill((*THEME.LIVE_PATH, 150))
            for cell in engine.live_path():
                if cell.type is CellType.END:
                    continue
                self.screen.blit(overlay, (ox + cell.col * cs, oy + cell.row * cs))

    # ---- pseudocode ----
    def _draw_pseudocode(self):
        s = self.session
        lines = s.pseudocode
        if not lines:
            return
        lh = self.font_small.get_linesize()
        w = max(self.font_small.size(t)[0] for t in lines) + 28
        h = lh * len(lines) + 20
        rect = pygame.Rect(self.canvas_rect.right - w - GRID_MARGIN - 8,
                           self.canvas_rect.y + GRID_MARGIN + 8, w, h)
        THEME.card(self.screen, rect)
        y = rect.y + 10
        for i, text in enumerate(lines):
            if i == s.current_line:
                band = pygame.Surface((rect.width - 12, lh), pygame.SRCALPHA)
                band.fill(THEME.LINE_HI)
                self.screen.blit(band, (rect.x + 6, y))
                color = THEME.ACCENT_GOLD
            else:
                color = THEME.TEXT_LIGHT
            self.screen.blit(self.font_small.render(text, True, color), (rect.x + 14, y))
            y += lh

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 36
        gap = 8
        half = (w - 8) // 2
        s = self.session

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None, rect=None):
            btn = UIButton(label, rect or pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", s.toggle, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", s.step_once); y += h + gap
        add("Reset", s.reset); y += h + gap

        add("Speed -", lambda: s.adjust_speed(-SPEED_STEP), rect=pygame.Rect(x, y, half, h))
        add("Speed +", lambda: s.adjust_speed(+SPEED_STEP), rect=pygame.Rect(x + half + 8, y, half, h))
        y += h + gap

        if s.mode is Mode.SORTING:
            add("New Array", s.new_array); y += h + gap
        else:
            add("Generate Maze", s.generate_maze); y += h + gap
            add("Clear Path", s.clear_path, rect=pygame.Rect(x, y, half, h))
            add("Clear Maze", s.clear_maze, rect=pygame.Rect(x + half + 8, y, half, h))
            y += h + gap
            add("Clear Walls", s.clear_walls); y += h + gap
            add("Diagonals", lambda: s.set_diagonal(not s.diagonal),
                togglable=True, store_as="btn_diag"); y += h + gap

        add("Pseudocode", self._toggle_code, togglable=True, store_as="btn_code")
        self._refresh_active_states()

    def _toggle_code(self):
        self.show_code = not self.show_code

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.session.is_playing)
        if hasattr(self, "btn_diag"):
            self.btn_diag.set_active(self.session.diagonal)
        if hasattr(self, "btn_code"):
            self.btn_code.set_active(self.show_code)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band
        s = self.session
        THEME.glass_panel(self.screen, rb.inflate(-8, -8))
        THEME.card(self.screen, pygame.Rect(rb.x + 10, rb.y + 10, rb.width - 20, 230))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=THEME.TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line(s.algorithm.value, big=True, color=THEME.ACCENT_GOLD)
        m = s.metrics()
        if s.mode is Mode.SORTING:
            line(f"Comparisons: {m.get('comparisons', 0)}")
            line(f"Array Accesses: {m.get('array_accesses', 0)}")
            line(f"Array Size: {len(s.array)}")
        else:
            line(f"Nodes Visited: {m.get('nodes_visited', 0)}")
            line(f"Path Cost: {m.get('path_cost', 0)}")
            line(f"Diagonals: {'on' if s.diagonal else 'off'}")

        line("-" * 26)
        line(f"Speed: {s.speed:.2f}x")
        line(s.status, color=THEME.TEXT_DIM)

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    try:
        settings = load_settings()
    except VisualizerError as ex:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"Failed to load settings: {ex}")
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, settings.log_level), format=LOG_FORMAT)
    logger.info(f"Starting with {settings.algorithm.value}, speed {settings.speed}x")
    try:
        session = VisualizationSession(settings)
    except VisualizerError as ex:
        logger.error(f"Failed to start session: {ex}")
        sys.exit(1)
    Viewer(session).run()


if __name__ == "__main__":
    main()

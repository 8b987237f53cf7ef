# algoviz/app/theme.py
"""
Dark glass skin (visuals only; no logic)
- Backdrop: uses assets/backdrop.jpg if present; else a dark gradient
- Bars: one fill per BarMark, settled bars green
- Grid: one fill per CellType, live path and the final path in yellow
- Panels: frosted glass underlay (viewer draws text/buttons on top)
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Tuple
import pygame

from algoviz.core.types import BarMark, CellType

# ---- palette ----
TEXT_LIGHT    = (230, 235, 240)
TEXT_DIM      = (150, 158, 170)
ACCENT_GOLD   = (255, 210, 0)

BAR_DEFAULT   = (120, 170, 255)
BAR_SORTED    = (46, 200, 120)
BAR_COLORS: Dict[BarMark, Tuple[int, int, int]] = {
    BarMark.COMPARE: (255, 210, 0),
    BarMark.SWAP:    (235, 70, 70),
    BarMark.PIVOT:   (200, 110, 255),
    BarMark.MERGED:  (0, 220, 200),
}

CELL_COLORS: Dict[CellType, Tuple[int, int, int]] = {
    CellType.EMPTY:   (236, 238, 242),
    CellType.START:   (46, 200, 120),
    CellType.END:     (220, 50, 47),
    CellType.WALL:    (50, 50, 50),
    CellType.VISITED: (173, 216, 230),
    CellType.PATH:    (255, 230, 60),
    CellType.WEIGHT:  (188, 143, 143),
}
VISITED_WEIGHT = (150, 130, 170)
LIVE_PATH      = (255, 230, 60)
GRID_LINE      = (200, 200, 200)

# panel colors
PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)
CARD_BG       = (24, 28, 36, 220)
CARD_HI       = (255, 255, 255, 18)
LINE_HI       = (255, 210, 0, 70)

ASSETS_DIR    = Path(__file__).resolve().parents[2] / "assets"
BACKDROP_IMG  = ASSETS_DIR / "backdrop.jpg"

# caches
_backdrop_raw: Optional[pygame.Surface] = None
_backdrop_loaded = False
_backdrop_scaled_by_h: Dict[int, pygame.Surface] = {}


# ---------- helpers ----------
def cell_color(cell) -> Tuple[int, int, int]:
    if cell.type is CellType.VISITED and cell.is_weight:
        return VISITED_WEIGHT
    return CELL_COLORS[cell.type]


def bar_color(index: int, marks, settled) -> Tuple[int, int, int]:
    if index in marks:
        return BAR_COLORS[marks[index]]
    if index in settled:
        return BAR_SORTED
    return BAR_DEFAULT


def rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)


def glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), fill_rgba, radius=20)
    # subtle top sheen
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, (255, 255, 255, 18), hi.get_rect(), border_radius=18)
    card.blit(hi, (0, 0))
    screen.blit(card, rect.topleft)


def card(screen: pygame.Surface, rect: pygame.Rect):
    surf = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(surf, CARD_BG, surf.get_rect(), border_radius=14)
    hi = pygame.Surface((rect.width, 24), pygame.SRCALPHA)
    pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
    surf.blit(hi, (0, 0))
    screen.blit(surf, rect.topleft)


def _load_backdrop():
    global _backdrop_raw, _backdrop_loaded
    if _backdrop_loaded:
        return
    _backdrop_loaded = True
    if BACKDROP_IMG.exists():
        img = pygame.image.load(str(BACKDROP_IMG))
        _backdrop_raw = img.convert() if not img.get_masks()[3] else img.convert_alpha()


def draw_backdrop(screen: pygame.Surface):
    """Backdrop: image if present; else gradient. Cached by height for speed."""
    _load_backdrop()
    w, h = screen.get_size()
    if _backdrop_raw is None:
        # gradient fallback
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h - 1)
            c = (
                int(top[0] + (bot[0] - top[0]) * t),
                int(top[1] + (bot[1] - top[1]) * t),
                int(top[2] + (bot[2] - top[2]) * t),
            )
            pygame.draw.line(screen, c, (0, y), (w, y))
        return

    key = h
    if key not in _backdrop_scaled_by_h:
        bw, bh = _backdrop_raw.get_width(), _backdrop_raw.get_height()
        scale = max(w / bw, h / bh)
        tw, th = int(bw * scale), int(bh * scale)
        _backdrop_scaled_by_h[key] = pygame.transform.smoothscale(_backdrop_raw, (tw, th))

    img = _backdrop_scaled_by_h[key]
    screen.blit(img, ((w - img.get_width()) // 2, (h - img.get_height()) // 2))

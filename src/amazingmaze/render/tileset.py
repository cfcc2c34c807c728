# src/amazingmaze/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Optional, Tuple

from ..tiles import Category, category_of

ASSET_DIR = os.path.join("assets", "tiles")

# Fallback fill per category when no image exists for an id.
FALLBACK_COLOURS = {
    Category.BACKGROUND: ( 40,  40,  48, 255),
    Category.PLACEHOLDER: (255,   0, 255, 255),
    Category.BARRIER: (120, 120, 120, 255),
    Category.WIRE: (230, 200,  60, 255),
    Category.GATE: ( 90, 160, 230, 255),
    Category.POWERUP: (240, 120,  60, 255),
}


def fallback_colour(tile_id: int) -> Tuple[int, int, int, int]:
    try:
        return FALLBACK_COLOURS[category_of(tile_id)]
    except ValueError:
        return (220, 220, 220, 255)


class Tileset:
    """
    Cached tile registry over a directory of PNGs:
      - Accepts 305.png or tile_305.png
      - Returns a pygame.Surface; ids without an image get a coloured square
    """
    def __init__(self, tile_size: int, asset_dir: str = ASSET_DIR, font: Optional[pygame.font.Font] = None):
        self.tile_size = tile_size
        self.asset_dir = asset_dir
        self.font = font

    def _path_candidates(self, tile_id: int) -> Tuple[str, ...]:
        return (
            os.path.join(self.asset_dir, f"{tile_id}.png"),
            os.path.join(self.asset_dir, f"tile_{tile_id}.png"),
        )

    def image_path(self, tile_id: int) -> Optional[str]:
        for p in self._path_candidates(tile_id):
            if os.path.exists(p):
                return p
        return None

    def has_tile(self, tile_id: int) -> bool:
        return self.image_path(tile_id) is not None

    @lru_cache(maxsize=512)
    def get(self, tile_id: int) -> pygame.Surface:
        p = self.image_path(tile_id)
        if p is not None:
            img = pygame.image.load(p)
            # convert_alpha needs a display; headless callers keep the raw surface.
            return img.convert_alpha() if pygame.display.get_surface() else img
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(fallback_colour(tile_id))
        if self.font is not None:
            txt = self.font.render(str(tile_id), True, (0, 0, 0))
            img.blit(txt, txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2)))
        return img

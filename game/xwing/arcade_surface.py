"""
Arcade backends for the drawing surface and the asset provider
"""

from __future__ import annotations

import os
import warnings
from typing import Dict, Iterable, Optional

import arcade
from arcade.types import LBWH

from .surface import BACKGROUND_IMAGE, PLAYER_IMAGE, Color

FONT_NAME = ("Helvetica", "Arial", "calibri")


class ArcadeSurface:
    """
    Draws through arcade's immediate-mode helpers.

    Game coordinates have y pointing down from the top-left corner; arcade
    puts the origin at the bottom-left, so every call is flipped against the
    surface height.
    """

    def __init__(self, height: int):
        self.height = height

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        top = self.height - y
        arcade.draw_lrbt_rectangle_filled(x, x + w, top - h, top, color)

    def fill_circle(self, x: float, y: float, r: float, color: Color) -> None:
        arcade.draw_circle_filled(x, self.height - y, r, color)

    def blit(self, image, x: float, y: float, w: float, h: float, alpha: int = 255) -> None:
        arcade.draw_texture_rect(image, LBWH(x, self.height - y - h, w, h), alpha=alpha)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color,
        size: float,
        anchor_x: str = "left",
    ) -> None:
        arcade.draw_text(
            text,
            x,
            self.height - y,
            color,
            size,
            anchor_x=anchor_x,
            font_name=FONT_NAME,
        )


class ArcadeAssets:
    """Loads the game's images as arcade textures from a directory"""

    def __init__(
        self,
        assets_dir: str = ".",
        names: Iterable[str] = (PLAYER_IMAGE, BACKGROUND_IMAGE),
    ):
        self.assets_dir = assets_dir
        self._textures: Dict[str, arcade.Texture] = {}
        for name in names:
            self.load(name)

    def load(self, name: str) -> bool:
        path = os.path.join(self.assets_dir, name)
        try:
            texture = arcade.load_texture(path)
        except (OSError, ValueError) as e:
            warnings.warn(f"{name} failed to load from {path}: {e}")
            return False
        self._textures[name] = texture
        print(f"[ArcadeAssets] Loaded {name}")
        return True

    def get(self, name: str) -> Optional[arcade.Texture]:
        return self._textures.get(name)

    def ready(self, name: str) -> bool:
        texture = self._textures.get(name)
        return texture is not None and texture.width > 0

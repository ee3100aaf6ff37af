"""
Scrolling backdrop. Purely cosmetic, owns no gameplay state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .surface import BACKGROUND_IMAGE, Surface

if TYPE_CHECKING:
    from .game import Game


DEFAULT_LAYER_WIDTH = 1768
DEFAULT_LAYER_HEIGHT = 500
FALLBACK_COLOR = (0, 0, 0, 255)
FALLBACK_GROUND_HEIGHT = 70


class Layer:
    """One horizontally wrapping strip, drawn twice side by side"""

    def __init__(self, game: "Game", image_name: str, speed_modifier: float):
        self.game = game
        self.image_name = image_name
        self.speed_modifier = speed_modifier
        self.width, self.height = self._image_size()
        self.x = 0.0
        self.y = 0.0

    def _image_size(self):
        image = self.game.assets.get(self.image_name)
        width = getattr(image, "width", 0) or DEFAULT_LAYER_WIDTH
        height = getattr(image, "height", 0) or DEFAULT_LAYER_HEIGHT
        return width, height

    def update(self):
        if self.x <= -self.width:
            self.x = 0.0
        else:
            self.x -= self.game.speed * self.speed_modifier

    def draw(self, surface: Surface) -> bool:
        """Blit the strip; returns False when the image is not ready"""
        assets = self.game.assets
        if not assets.ready(self.image_name):
            return False
        image = assets.get(self.image_name)
        surface.blit(image, self.x, self.y, self.width, self.height)
        surface.blit(image, self.x + self.width, self.y, self.width, self.height)
        return True


class Background:
    """Single parallax layer with a solid-color fallback"""

    def __init__(self, game: "Game", image_name: str = BACKGROUND_IMAGE):
        self.game = game
        self.layer = Layer(game, image_name, 1)

    def update(self):
        self.layer.update()

    def draw(self, surface: Surface):
        if self.layer.draw(surface):
            return
        surface.fill_rect(0, 0, self.game.width, self.game.height, FALLBACK_COLOR)
        surface.fill_rect(
            0,
            self.game.height - FALLBACK_GROUND_HEIGHT,
            self.game.width,
            FALLBACK_GROUND_HEIGHT,
            FALLBACK_COLOR,
        )

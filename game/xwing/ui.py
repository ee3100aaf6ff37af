"""
Heads-up display. Stateless: everything is read from the Game each frame.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .surface import Surface

if TYPE_CHECKING:
    from .game import Game


WHITE = (255, 255, 255)
GOLD = (255, 215, 0)
HEART_RED = (255, 75, 75)
SHADOW = (0, 0, 0)
SHADOW_OFFSET = 2

HEART_SIZE = 18
HEART_SPACING = 6
HEARTS_X = 20
HEARTS_Y = 50

AMMO_BAR_WIDTH = 6
AMMO_BAR_HEIGHT = 18
AMMO_SPACING = 8
AMMO_Y = 50
RIGHT_MARGIN = 20

WIN_MESSAGES = ("You Win!", "Well Done!")
LOSE_MESSAGES = ("Game Over!", "Try Again!")


def format_time(ms: float) -> str:
    """Elapsed milliseconds as seconds with one decimal"""
    return f"{ms * 0.001:.1f}"


def draw_heart(surface: Surface, x: float, y: float, size: float, color=HEART_RED):
    """Heart centred horizontally on x with its top at y"""
    lobe = size / 4
    surface.fill_circle(x - lobe, y + lobe, lobe, color)
    surface.fill_circle(x + lobe, y + lobe, lobe, color)
    # Taper towards the tip with a stack of shrinking bars
    rows = 4
    row_h = (size - lobe) / rows
    for i in range(rows):
        w = size * (1 - i / rows)
        surface.fill_rect(x - w / 2, y + lobe + i * row_h, w, row_h, color)


class UI:
    def __init__(self, game: "Game"):
        self.game = game
        self.font_size = 25
        self.color = WHITE

    def game_over_messages(self):
        """Headline and subline for the end screen"""
        return WIN_MESSAGES if self.game.won else LOSE_MESSAGES

    def _text(self, surface: Surface, text, x, y, size, anchor_x="left", color=None):
        color = color or self.color
        surface.draw_text(text, x + SHADOW_OFFSET, y + SHADOW_OFFSET, SHADOW, size, anchor_x)
        surface.draw_text(text, x, y, color, size, anchor_x)

    def draw(self, surface: Surface):
        game = self.game

        self._text(surface, f"Score: {game.score}", game.width / 2, 40, self.font_size, "center")
        if game.score_multiplier > 1:
            self._text(
                surface, f"x{game.score_multiplier}", game.width / 2 + 110, 40, 18, "center", GOLD
            )

        for i in range(max(game.lives, 0)):
            x = HEARTS_X + i * (HEART_SIZE + HEART_SPACING) + HEART_SIZE / 2
            draw_heart(surface, x, HEARTS_Y, HEART_SIZE)

        self._text(surface, f"Time: {format_time(game.game_time)}", HEARTS_X, HEARTS_Y - 20, 20)

        start_x = game.width - RIGHT_MARGIN - game.ammo * AMMO_SPACING
        for i in range(game.ammo):
            surface.fill_rect(
                start_x + i * AMMO_SPACING, AMMO_Y, AMMO_BAR_WIDTH, AMMO_BAR_HEIGHT, WHITE
            )

        self._text(surface, f"High: {game.high_score}", game.width - RIGHT_MARGIN, 40, 20, "right")

        if game.game_over:
            headline, subline = self.game_over_messages()
            self._text(surface, headline, game.width / 2, game.height / 2, 50, "center")
            self._text(surface, subline, game.width / 2, game.height / 2 + 40, 25, "center")

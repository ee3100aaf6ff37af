"""
Arcade window: the animation driver, keyboard input and start/restart controls
"""

from __future__ import annotations

import arcade

from .arcade_surface import ArcadeSurface
from .game import Game, GameState
from .input import Key

KEY_MAP = {
    arcade.key.UP: Key.UP,
    arcade.key.DOWN: Key.DOWN,
    arcade.key.Z: Key.FIRE_TOP,
    arcade.key.X: Key.FIRE_BOTTOM,
}

START_KEYS = (arcade.key.ENTER, arcade.key.RETURN)
RESTART_KEY = arcade.key.R

TITLE_COLOR = (255, 255, 255)


class XWingWindow(arcade.Window):
    """Runs one Game.update + Game.draw per frame"""

    def __init__(self, game: Game, title: str = "X-Wing Game"):
        super().__init__(game.width, game.height, title)
        self.game = game
        self.surface = ArcadeSurface(game.height)
        self.background_color = arcade.color.BLACK

    def on_update(self, delta_time: float):
        # arcade hands us seconds; the simulation counts milliseconds
        self.game.update(delta_time * 1000.0)

    def on_draw(self):
        self.clear()
        if self.game.state is GameState.NOT_STARTED:
            self.draw_start_screen()
            return
        self.game.draw(self.surface)
        if self.game.game_over:
            self.surface.draw_text(
                "Press R to play again",
                self.game.width / 2,
                self.game.height - 20,
                TITLE_COLOR,
                14,
                anchor_x="center",
            )

    def draw_start_screen(self):
        game = self.game
        game.background.draw(self.surface)
        self.surface.draw_text(
            "X-Wing Game", game.width / 2, game.height / 2 - 20, TITLE_COLOR, 36, "center"
        )
        self.surface.draw_text(
            "Press Enter to start", game.width / 2, game.height / 2 + 20, TITLE_COLOR, 18, "center"
        )

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
        elif symbol in START_KEYS:
            self.game.start()
        elif symbol == RESTART_KEY:
            self.game.restart()
        elif symbol in KEY_MAP:
            self.game.keys.press(KEY_MAP[symbol])

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in KEY_MAP:
            self.game.keys.release(KEY_MAP[symbol])

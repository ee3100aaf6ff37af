"""
Tests for the HUD, background and asset fallbacks.
"""
from game.xwing.background import Background
from game.xwing.game import Game
from game.xwing.surface import BACKGROUND_IMAGE, PLAYER_IMAGE
from game.xwing.ui import format_time

from conftest import FakeAssets


class TestHud:
    def test_score_high_and_time(self, game, surface):
        game.score = 12
        game.high_score = 40
        game.game_time = 1549
        game.ui.draw(surface)

        texts = surface.texts()
        assert "Score: 12" in texts
        assert "High: 40" in texts
        assert "Time: 1.5" in texts

    def test_one_bar_per_round_of_ammo(self, game, surface):
        game.ammo = 7
        game.ui.draw(surface)
        bars = [c for c in surface.of_kind("rect") if c[3:5] == (6, 18)]
        assert len(bars) == 7
        # right-aligned against the margin
        assert bars[-1][1] + 8 == game.width - 20

    def test_one_heart_per_life(self, game, surface):
        game.lives = 2
        game.ui.draw(surface)
        lobes = [c for c in surface.of_kind("circle") if c[4] == (255, 75, 75)]
        assert len(lobes) == 4

    def test_multiplier_badge(self, game, surface):
        game.ui.draw(surface)
        assert "x2" not in surface.texts()

        game.score_multiplier = 2
        game.ui.draw(surface)
        assert "x2" in surface.texts()

    def test_no_message_while_playing(self, game, surface):
        game.ui.draw(surface)
        texts = surface.texts()
        assert "Game Over!" not in texts and "You Win!" not in texts

    def test_lose_message(self, game, surface):
        game._end_round()
        game.ui.draw(surface)
        texts = surface.texts()
        assert "Game Over!" in texts
        assert "Try Again!" in texts

    def test_win_message(self, game, surface):
        game.score = game.winning_score
        game._end_round()
        game.ui.draw(surface)
        texts = surface.texts()
        assert "You Win!" in texts
        assert "Well Done!" in texts

    def test_format_time(self):
        assert format_time(0) == "0.0"
        assert format_time(30000) == "30.0"


class TestAssets:
    def test_images_used_when_ready(self, surface):
        game = Game(assets=FakeAssets())
        game.reset()
        game.draw(surface)

        blits = surface.of_kind("blit")
        names = [b[1].name for b in blits]
        assert names.count(BACKGROUND_IMAGE) == 2
        assert names.count(PLAYER_IMAGE) == 1
        assert "PLAYER" not in surface.texts()

    def test_fallbacks_when_not_ready(self, game, surface):
        game.draw(surface)
        assert surface.of_kind("blit") == []
        assert "PLAYER" in surface.texts()


class TestBackground:
    def test_scroll_wraps(self):
        game = Game(assets=FakeAssets(width=10, height=10), speed=4)
        bg = Background(game)
        xs = []
        for _ in range(5):
            bg.update()
            xs.append(bg.layer.x)
        assert xs == [-4, -8, -12, 0, -4]

    def test_default_strip_size_without_image(self, game):
        bg = Background(game)
        assert (bg.layer.width, bg.layer.height) == (1768, 500)

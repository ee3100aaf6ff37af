"""
Tests for player movement and the two weapons.
"""
from game.xwing.entities import Projectile
from game.xwing.input import Key


class TestMovement:
    def test_clamped_at_top(self, game):
        """Holding up at y=0 keeps the craft at y=0."""
        player = game.player
        player.y = 0
        game.keys.press(Key.UP)
        player.update(16)
        assert player.y == 0

    def test_clamped_at_bottom(self, game):
        player = game.player
        player.y = game.height - player.height
        game.keys.press(Key.DOWN)
        player.update(16)
        assert player.y == game.height - player.height

    def test_moves_by_max_speed(self, game):
        player = game.player
        start = player.y
        game.keys.press(Key.DOWN)
        player.update(16)
        assert player.y == start + player.max_speed
        game.keys.release(Key.DOWN)
        game.keys.press(Key.UP)
        player.update(16)
        assert player.y == start

    def test_up_wins_over_down(self, game):
        start = game.player.y
        game.keys.press(Key.UP)
        game.keys.press(Key.DOWN)
        game.player.update(16)
        assert game.player.y == start - game.player.max_speed

    def test_x_is_fixed(self, game):
        game.keys.press(Key.DOWN)
        for _ in range(100):
            game.player.update(16)
        assert game.player.x == 20


class TestWeapons:
    def test_first_press_fires_immediately(self, game):
        player = game.player
        game.keys.press(Key.FIRE_TOP)
        player.update(16)

        assert len(player.projectiles) == 1
        shot = player.projectiles[0]
        assert shot.x == player.x + player.width
        assert shot.y == player.y + 8
        assert game.ammo == 24
        assert player.shoot_top_timer == 0

    def test_bottom_gun_offset(self, game):
        player = game.player
        game.keys.press(Key.FIRE_BOTTOM)
        player.update(16)
        assert player.projectiles[0].y == player.y + player.height - 12

    def test_both_guns_fire_together(self, game):
        game.keys.press(Key.FIRE_TOP)
        game.keys.press(Key.FIRE_BOTTOM)
        game.player.update(16)
        assert len(game.player.projectiles) == 2
        assert game.ammo == 23

    def test_cooldown_while_held(self, game):
        """Held trigger refires once the interval has accumulated."""
        player = game.player
        game.keys.press(Key.FIRE_TOP)
        for _ in range(5):
            player.update(50)
        # fired on frame 1, timer now back at the interval but not yet fired
        assert len(player.projectiles) == 1
        assert player.shoot_top_timer == 200
        player.update(50)
        assert len(player.projectiles) == 2

    def test_release_resets_cooldown(self, game):
        player = game.player
        game.keys.press(Key.FIRE_TOP)
        player.update(16)
        player.update(16)
        assert player.shoot_top_timer == 16

        game.keys.release(Key.FIRE_TOP)
        player.update(16)
        assert player.shoot_top_timer == game.shoot_interval

        game.keys.press(Key.FIRE_TOP)
        player.update(16)
        assert len(player.projectiles) == 2

    def test_weapons_are_independent(self, game):
        player = game.player
        game.keys.press(Key.FIRE_TOP)
        player.update(16)
        assert player.shoot_bottom_timer == game.shoot_interval

        game.keys.press(Key.FIRE_BOTTOM)
        player.update(16)
        # top still cooling down, bottom fires straight away
        assert player.shoot_top_timer == 16
        assert player.shoot_bottom_timer == 0
        assert len(player.projectiles) == 2

    def test_no_ammo_is_a_no_op(self, game):
        game.ammo = 0
        game.keys.press(Key.FIRE_TOP)
        game.keys.press(Key.FIRE_BOTTOM)
        game.player.update(16)
        assert game.player.projectiles == []
        assert game.ammo == 0


class TestProjectiles:
    def test_marked_projectiles_are_pruned(self, game):
        player = game.player
        keep = Projectile(x=200, y=10, max_x=490)
        gone = Projectile(x=200, y=30, max_x=490, marked_for_deletion=True)
        player.projectiles = [keep, gone]
        player.update(16)
        assert player.projectiles == [keep]

    def test_projectiles_leave_playfield(self, game):
        game.keys.press(Key.FIRE_TOP)
        game.player.update(16)
        game.keys.release(Key.FIRE_TOP)
        for _ in range(100):
            game.player.update(16)
        assert game.player.projectiles == []

    def test_marked_projectiles_not_drawn(self, game, surface):
        player = game.player
        player.projectiles = [
            Projectile(x=200, y=10, max_x=490),
            Projectile(x=300, y=10, max_x=490, marked_for_deletion=True),
        ]
        player.draw(surface)
        drawn = [c for c in surface.of_kind("rect") if c[3:5] == (40, 12)]
        assert len(drawn) == 1
        assert drawn[0][1] == 200


class TestDrawing:
    def test_placeholder_without_image(self, game, surface):
        game.player.draw(surface)
        assert "PLAYER" in surface.texts()
        assert surface.of_kind("blit") == []

    def test_dimmed_while_flashing(self, game, surface):
        game.invincible = True
        game.invincible_timer = 150
        game.player.draw(surface)
        craft = surface.of_kind("rect")[0]
        assert craft[5][3] == 77

    def test_opaque_on_flash_frame(self, game, surface):
        game.invincible = True
        game.invincible_timer = 50
        game.player.draw(surface)
        assert surface.of_kind("rect")[0][5][3] == 255

"""
Player craft: vertical movement and two independently timed lasers
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from .entities import Projectile
from .input import Key
from .surface import PLAYER_IMAGE, Surface
from .utils import clamp

if TYPE_CHECKING:
    from .game import Game


PLACEHOLDER_COLOR = (0, 0, 0)
PLACEHOLDER_TEXT_COLOR = (255, 255, 255)

TOP_GUN_OFFSET = 8
BOTTOM_GUN_OFFSET = 12  # measured up from the bottom edge
FLASH_PERIOD_MS = 100
FLASH_DIM_ALPHA = 77  # ~0.3 opacity


class Player:
    """Player ship pinned to the left side of the playfield"""

    def __init__(self, game: "Game"):
        self.game = game
        self.width = 120
        self.height = 90
        self.x = 20
        self.y = (game.height - self.height) / 2
        self.speed_y = 0
        self.max_speed = 5
        self.projectiles: List[Projectile] = []
        self.shoot_top_timer = game.shoot_interval
        self.shoot_bottom_timer = game.shoot_interval

    def update(self, delta_ms: float):
        self.move()
        self.update_projectiles()
        self.shoot_top_timer = self._run_weapon(
            Key.FIRE_TOP, self.shoot_top_timer, delta_ms, self.shoot_top_laser
        )
        self.shoot_bottom_timer = self._run_weapon(
            Key.FIRE_BOTTOM, self.shoot_bottom_timer, delta_ms, self.shoot_bottom_laser
        )

    def move(self):
        keys = self.game.keys
        if Key.UP in keys:
            self.speed_y = -self.max_speed
        elif Key.DOWN in keys:
            self.speed_y = self.max_speed
        else:
            self.speed_y = 0

        self.y = clamp(self.y + self.speed_y, 0, self.game.height - self.height)

    def update_projectiles(self):
        for p in self.projectiles:
            p.update()
        self.projectiles = [p for p in self.projectiles if not p.marked_for_deletion]

    def _run_weapon(self, key: Key, timer: float, delta_ms: float, fire) -> float:
        """Advance one weapon's cooldown and return its new timer value"""
        interval = self.game.shoot_interval
        if key not in self.game.keys:
            # Released trigger: the next press fires immediately
            return interval
        if timer >= interval:
            fire()
            return 0
        return timer + delta_ms

    def shoot_top_laser(self) -> bool:
        return self._fire(self.y + TOP_GUN_OFFSET)

    def shoot_bottom_laser(self) -> bool:
        return self._fire(self.y + self.height - BOTTOM_GUN_OFFSET)

    def _fire(self, py: float) -> bool:
        if self.game.ammo <= 0:
            return False
        self.projectiles.append(
            Projectile(x=self.x + self.width, y=py, max_x=self.game.width * 0.98)
        )
        self.game.ammo -= 1
        return True

    def draw(self, surface: Surface):
        alpha = 255
        if self.game.invincible:
            flash_on = int(self.game.invincible_timer // FLASH_PERIOD_MS) % 2 == 0
            alpha = 255 if flash_on else FLASH_DIM_ALPHA
        self._draw_craft(surface, alpha)

        for p in self.projectiles:
            if not p.marked_for_deletion:
                p.draw(surface)

    def _draw_craft(self, surface: Surface, alpha: int):
        assets = self.game.assets
        if assets.ready(PLAYER_IMAGE):
            surface.blit(assets.get(PLAYER_IMAGE), self.x, self.y, self.width, self.height, alpha)
            return

        surface.fill_rect(self.x, self.y, self.width, self.height, PLACEHOLDER_COLOR + (alpha,))
        surface.draw_text(
            "PLAYER",
            self.x + 6,
            self.y + self.height / 2 + 6,
            PLACEHOLDER_TEXT_COLOR + (alpha,),
            14,
        )

"""
Game entity dataclasses

Every entity carries a ``marked_for_deletion`` tombstone. Owners update all
entities first and filter the marked ones afterwards, so a removal is never
observed halfway through a frame.
"""

import math
import random
from dataclasses import dataclass
from typing import Optional


ENEMY_BASE = "base"
ENEMY_ANGLER1 = "angler1"
ENEMY_VARIANTS = (ENEMY_BASE, ENEMY_ANGLER1)

PARTICLE_MIN_SIZE = 0.2
PARTICLE_SHRINK = 0.1

PROJECTILE_COLOR = (255, 255, 0)
PARTICLE_COLOR = (255, 255, 0)
ENEMY_COLOR = (255, 0, 0)
ENEMY_TEXT_COLOR = (0, 0, 0)


@dataclass
class Projectile:
    """Laser bolt fired by the player, travels to the right"""
    x: float
    y: float
    max_x: float  # marked once past this column
    width: float = 40.0
    height: float = 12.0
    speed: float = 6.0
    marked_for_deletion: bool = False

    def update(self):
        if self.marked_for_deletion:
            return
        self.x += self.speed
        if self.x > self.max_x:
            self.marked_for_deletion = True

    def draw(self, surface):
        surface.fill_rect(self.x, self.y, self.width, self.height, PROJECTILE_COLOR)


@dataclass
class Particle:
    """Explosion debris: drifts and shrinks until it disappears"""
    x: float
    y: float
    size: float
    speed_x: float
    speed_y: float
    marked_for_deletion: bool = False

    def update(self):
        if self.marked_for_deletion:
            return
        self.x += self.speed_x
        self.y += self.speed_y
        if self.size > PARTICLE_MIN_SIZE:
            self.size -= PARTICLE_SHRINK
        else:
            self.marked_for_deletion = True

    def draw(self, surface):
        surface.fill_circle(self.x, self.y, self.size, PARTICLE_COLOR)


@dataclass
class Enemy:
    """Enemy ship drifting leftwards; variant is a tag, not a subclass"""
    x: float
    y: float
    width: float
    height: float
    speed_x: float  # px per frame, negative
    lives: int
    score: int = 0
    variant: str = ENEMY_BASE
    marked_for_deletion: bool = False

    def update(self):
        if self.marked_for_deletion:
            return
        self.x += self.speed_x
        if self.x + self.width < 0:
            self.marked_for_deletion = True

    def draw(self, surface):
        surface.fill_rect(self.x, self.y, self.width, self.height, ENEMY_COLOR)
        surface.draw_text(str(self.lives), self.x + 8, self.y + 22, ENEMY_TEXT_COLOR, 18)

    def hit(self) -> bool:
        """Take one hit. Returns True when this hit destroyed the enemy."""
        self.lives -= 1
        if self.lives <= 0:
            self.marked_for_deletion = True
            return True
        return False


def make_particle(x: float, y: float, rng: Optional[random.Random] = None) -> Particle:
    """Particle with random size in [1, 6) and velocity in [-1.5, 1.5)"""
    rng = rng or random
    return Particle(
        x=x,
        y=y,
        size=rng.random() * 5 + 1,
        speed_x=rng.random() * 3 - 1.5,
        speed_y=rng.random() * 3 - 1.5,
    )


def make_enemy(
    variant: str,
    game_width: float,
    game_height: float,
    rng: Optional[random.Random] = None,
) -> Enemy:
    """Spawn an enemy of the given variant at the right edge of the playfield"""
    if variant not in ENEMY_VARIANTS:
        raise ValueError(f"Unknown enemy variant: {variant}")
    rng = rng or random

    if variant == ENEMY_BASE:
        width, height = 120.0, 90.0
        y = rng.random() * (game_height - height)
        speed_x = rng.random() * -2 - 2
        lives = 3
    else:
        width = float(math.floor(228 * 0.3))
        height = float(math.floor(169 * 0.3))
        y = rng.random() * (game_height * 0.95 - height)
        speed_x = rng.random() * -2.5 - 2.0
        lives = 2 + rng.randrange(3)

    # Score value is fixed at spawn, before any damage
    return Enemy(
        x=float(game_width),
        y=y,
        width=width,
        height=height,
        speed_x=speed_x,
        lives=lives,
        score=lives,
        variant=variant,
    )

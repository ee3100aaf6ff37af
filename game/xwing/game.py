"""
Game orchestrator for the X-Wing shooter.

Owns every entity collection and the round lifecycle::

    NOT_STARTED --start()--> PLAYING --win/loss--> GAME_OVER --restart()--> PLAYING

A driver calls ``update(delta_ms)`` then ``draw(surface)`` once per frame.
The class never touches a window, clock or file directly: drawing goes
through a ``Surface``, images through an ``Assets`` provider and the high
score through a ``ScoreStore``, all injected.
"""

from __future__ import annotations

import random
import warnings
from enum import Enum, auto
from typing import List, Optional

from .background import Background
from .config import HIT_PARTICLES, KILL_PARTICLES
from .entities import ENEMY_ANGLER1, Enemy, Particle, make_enemy, make_particle
from .input import InputState
from .player import Player
from .storage import HIGH_SCORE_KEY, MemoryScoreStore, ScoreStore
from .surface import Assets, NullAssets, Surface
from .ui import UI
from .utils import center_of, rect_collide


class GameState(Enum):
    """Round lifecycle"""
    NOT_STARTED = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class Game:
    """Single-screen shooter simulation"""

    def __init__(
        self,
        width: int = 500,
        height: int = 400,
        shoot_interval: float = 200,
        enemy_interval: float = 1000,
        starting_ammo: int = 25,
        max_ammo: int = 200,
        ammo_interval: float = 500,
        lives: int = 3,
        invincible_duration: float = 1000,
        winning_score: int = 100,
        multiplier_time: float = 30000,
        speed: float = 1,
        store: Optional[ScoreStore] = None,
        assets: Optional[Assets] = None,
        seed: Optional[int] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Playfield must have a positive size, got {width}x{height}")
        if min(shoot_interval, enemy_interval, ammo_interval) <= 0:
            raise ValueError("Timer intervals must be positive")
        if lives <= 0:
            raise ValueError(f"lives must be positive, got {lives}")
        if max_ammo < 0 or starting_ammo < 0:
            raise ValueError("Ammo counts cannot be negative")

        # Playfield and fixed rules
        self.width = width
        self.height = height
        self.shoot_interval = shoot_interval
        self.enemy_interval = enemy_interval
        self.starting_ammo = min(starting_ammo, max_ammo)
        self.max_ammo = max_ammo
        self.ammo_interval = ammo_interval
        self.starting_lives = lives
        self.invincible_duration = invincible_duration
        self.winning_score = winning_score
        self.multiplier_time = multiplier_time
        self.speed = speed

        # Collaborators
        self.keys = InputState()
        self.store: ScoreStore = store if store is not None else MemoryScoreStore()
        self.assets: Assets = assets if assets is not None else NullAssets()
        self.rng = random.Random(seed)
        self.ui = UI(self)

        self.high_score = self._load_high_score()

        self._init_round()
        self.state = GameState.NOT_STARTED

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def _init_round(self):
        self.player = Player(self)
        self.background = Background(self)
        self.enemies: List[Enemy] = []
        self.particles: List[Particle] = []
        self.enemy_timer = 0.0
        self.ammo = self.starting_ammo
        self.ammo_timer = 0.0
        self.lives = self.starting_lives
        self.invincible = False
        self.invincible_timer = 0.0
        self.score = 0
        self.score_multiplier = 1
        self.game_time = 0.0
        self._high_score_saved = False

    def reset(self, seed: Optional[int] = None):
        """Start a fresh round on this Game object"""
        if seed is not None:
            self.rng.seed(seed)
        self._init_round()
        self.state = GameState.PLAYING

    def start(self) -> bool:
        """'Start' control. Only acts before the first round."""
        if self.state is not GameState.NOT_STARTED:
            return False
        self.reset()
        return True

    def restart(self) -> bool:
        """'Play again' control. Only acts once the round is over."""
        if self.state is not GameState.GAME_OVER:
            return False
        self.reset()
        return True

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def won(self) -> bool:
        return self.game_over and self.score >= self.winning_score

    def _end_round(self):
        self.state = GameState.GAME_OVER

    # ----------------------------
    # Per-frame simulation
    # ----------------------------

    def update(self, delta_ms: float):
        if self.state is GameState.NOT_STARTED:
            return
        # A clock that steps backwards is treated as a paused frame
        delta_ms = max(0.0, float(delta_ms))

        if self.state is GameState.PLAYING:
            self.game_time += delta_ms
            self.player.update(delta_ms)
        else:
            self.player.update_projectiles()
        self.background.update()

        self._update_invincibility(delta_ms)
        self._update_ammo(delta_ms)

        for enemy in self.enemies:
            enemy.update()
            if enemy.marked_for_deletion or self.state is not GameState.PLAYING:
                continue
            self._check_player_collision(enemy)
            self._check_projectile_hits(enemy)

        for p in self.particles:
            p.update()
        self.particles = [p for p in self.particles if not p.marked_for_deletion]
        self.enemies = [e for e in self.enemies if not e.marked_for_deletion]

        if self.enemy_timer > self.enemy_interval and not self.game_over:
            self.add_enemy()
            self.enemy_timer = 0.0
        else:
            self.enemy_timer += delta_ms

        if self.game_over and not self._high_score_saved:
            self._record_high_score()

    def _update_invincibility(self, delta_ms: float):
        if not self.invincible:
            return
        if self.invincible_timer > self.invincible_duration:
            self.invincible = False
            self.invincible_timer = 0.0
        else:
            self.invincible_timer += delta_ms

    def _update_ammo(self, delta_ms: float):
        if self.ammo_timer > self.ammo_interval:
            if self.ammo < self.max_ammo:
                self.ammo += 1
            self.ammo_timer = 0.0
        else:
            self.ammo_timer += delta_ms

    def _check_player_collision(self, enemy: Enemy):
        if self.invincible or not rect_collide(self.player, enemy):
            return
        enemy.marked_for_deletion = True
        self.lives -= 1
        self.invincible = True
        self.invincible_timer = 0.0
        if self.lives <= 0:
            self._end_round()

    def _check_projectile_hits(self, enemy: Enemy):
        for projectile in self.player.projectiles:
            if enemy.marked_for_deletion:
                return
            if projectile.marked_for_deletion or not rect_collide(projectile, enemy):
                continue

            projectile.marked_for_deletion = True
            cx, cy = center_of(enemy)
            if enemy.hit():
                self.score += enemy.score
                self.spawn_particles(cx, cy, KILL_PARTICLES)
                if self.score >= self.winning_score:
                    self._end_round()
            else:
                self.spawn_particles(cx, cy, HIT_PARTICLES)

    def spawn_particles(self, x: float, y: float, count: int):
        for _ in range(count):
            self.particles.append(make_particle(x, y, self.rng))

    def add_enemy(self, variant: str = ENEMY_ANGLER1) -> Enemy:
        enemy = make_enemy(variant, self.width, self.height, self.rng)
        self.enemies.append(enemy)
        return enemy

    # ----------------------------
    # High score
    # ----------------------------

    def _load_high_score(self) -> int:
        saved = self.store.get(HIGH_SCORE_KEY)
        return int(saved) if saved else 0

    def _record_high_score(self):
        """Runs once per game over; flag is cleared by reset()"""
        self._high_score_saved = True
        if self.score <= self.high_score:
            return

        # The x2 badge is only ever awarded here, never during live scoring
        if self.game_time >= self.multiplier_time:
            self.score_multiplier = 2
        self.high_score = self.score
        try:
            self.store.set(HIGH_SCORE_KEY, self.high_score)
        except Exception as e:
            warnings.warn(f"Could not persist high score: {e}")

    # ----------------------------
    # Rendering
    # ----------------------------

    def draw(self, surface: Surface):
        self.background.draw(surface)
        self.player.draw(surface)
        for e in self.enemies:
            e.draw(surface)
        for p in self.particles:
            p.draw(surface)
        self.ui.draw(surface)

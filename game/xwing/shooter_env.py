"""
XWingEnv - Gymnasium driver for the X-Wing shooter
---------------------------------------------------
- Wraps the frame-driven Game behind explicit step() calls
- Gymnasium API, so scripted agents, RL libraries and tests can play headless
- MultiDiscrete action space: [move(3), fire_top(2), fire_bottom(2)]
- Vector observation: player state + top-K nearest enemies
- Optional arcade window for render_mode="human"

Quick test:
    python -m game.xwing.shooter_env
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, GAME_CONFIG
from .game import Game
from .input import Key
from .utils import center_of, clamp, seed_everything


MOVE_KEYS = {0: None, 1: Key.UP, 2: Key.DOWN}

R_LIFE_LOST = 1.0


class XWingEnv(gym.Env):
    """Headless, step-driven wrapper around Game"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        frame_ms: float = 16,
        max_steps: int = 3600,
        k_enemies: int = 5,
        game_config: Optional[Dict[str, Any]] = None,
        game: Optional[Game] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        if frame_ms <= 0:
            raise ValueError(f"frame_ms must be positive, got {frame_ms}")

        self.render_mode = render_mode
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.k_enemies = k_enemies

        self.game = game if game is not None else Game(**(game_config or GAME_CONFIG))

        # move: 0 stay, 1 up, 2 down; fire_top: 0/1; fire_bottom: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2, 2])

        # Player: y(1) ammo(1) lives(1) invincible(1)
        # Each enemy: rel pos(2) lives(1)
        obs_dim = 4 + self.k_enemies * 3
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self._step_count = 0
        self.game.keys.clear()
        self.game.reset(seed=seed)

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire_top, fire_bottom = int(action[0]), int(action[1]), int(action[2])

        held = []
        if MOVE_KEYS.get(move) is not None:
            held.append(MOVE_KEYS[move])
        if fire_top:
            held.append(Key.FIRE_TOP)
        if fire_bottom:
            held.append(Key.FIRE_BOTTOM)
        self.game.keys.set_held(held)

        score_before = self.game.score
        lives_before = self.game.lives

        self.game.update(self.frame_ms)

        reward = float(self.game.score - score_before)
        reward -= R_LIFE_LOST * max(0, lives_before - self.game.lives)

        terminated = self.game.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        game = self.game
        player = game.player

        travel = max(1.0, game.height - player.height)
        obs_parts = [
            (player.y / travel) * 2 - 1,
            (game.ammo / max(1, game.max_ammo)) * 2 - 1,
            (game.lives / max(1, game.starting_lives)) * 2 - 1,
            1.0 if game.invincible else -1.0,
        ]

        px, py = center_of(player)
        enemies_sorted = sorted(
            game.enemies,
            key=lambda e: (center_of(e)[0] - px) ** 2 + (center_of(e)[1] - py) ** 2,
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                ex, ey = center_of(e)
                obs_parts += [
                    clamp((ex - px) / game.width, -1, 1),
                    clamp((ey - py) / game.height, -1, 1),
                    clamp(e.lives / 4.0, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lives": self.game.lives,
            "ammo": self.game.ammo,
            "high_score": self.game.high_score,
            "num_enemies": len(self.game.enemies),
            "num_particles": len(self.game.particles),
            "num_projectiles": len(self.game.player.projectiles),
            "won": self.game.won,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode != "human":
            return None

        if self._window is None:
            # arcade needs a display; only pull it in when a window is wanted
            from .window import XWingWindow
            self._window = XWingWindow(self.game)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random-action episode and return its total reward"""
    env = XWingEnv(render_mode="human" if render else None, **ENV_CONFIG)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("[XWingEnv] Running random episode...")
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.frame_ms / 1000.0)

    print(f"[XWingEnv] Random episode return: {total} (score {info['score']}, won={info['won']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)

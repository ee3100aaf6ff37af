"""X-Wing Game - single-screen arcade shooter"""

from .game import Game, GameState
from .input import InputState, Key
from .shooter_env import XWingEnv, run_random_episode

__all__ = ['Game', 'GameState', 'InputState', 'Key', 'XWingEnv', 'run_random_episode']

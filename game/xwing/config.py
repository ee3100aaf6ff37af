"""
Game configuration for the X-Wing shooter
Constants are grouped per consumer and passed as keyword arguments.
"""

# Simulation parameters (all timers in milliseconds)
GAME_CONFIG = {
    "width": 500,
    "height": 400,
    "shoot_interval": 200,
    "enemy_interval": 1000,
    "starting_ammo": 25,
    "max_ammo": 200,
    "ammo_interval": 500,
    "lives": 3,
    "invincible_duration": 1000,
    "winning_score": 100,
    "multiplier_time": 30000,  # a high score set after 30s earns the x2 badge
    "speed": 1,  # background scroll, px per frame
}

# Gymnasium driver parameters
ENV_CONFIG = {
    "frame_ms": 16,  # ~60 FPS
    "max_steps": 3600,  # ~60 seconds of play
    "k_enemies": 5,
}

# Window / CLI defaults
WINDOW_CONFIG = {
    "title": "X-Wing Game",
    "assets_dir": ".",
    "store_path": "highscore.json",
}

# Particle bursts when a projectile connects
HIT_PARTICLES = 8
KILL_PARTICLES = 14

"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rect_collide(a, b) -> bool:
    """Check if two axis-aligned rectangles overlap.

    Works on anything exposing ``x``, ``y``, ``width`` and ``height``.
    Rectangles that only share an edge do not collide.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def center_of(rect) -> tuple:
    """Center point of a rectangle-like entity"""
    return rect.x + rect.width / 2, rect.y + rect.height / 2


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)

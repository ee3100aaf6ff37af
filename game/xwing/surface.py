"""
Drawing and asset interfaces used by the simulation core.

Coordinates are screen space with the origin at the top-left corner and y
growing downward. Text is positioned by its baseline. Concrete backends
(see ``arcade_surface``) translate.
"""

from __future__ import annotations
from typing import Any, Optional, Protocol, Tuple, Union

Color = Union[Tuple[int, int, int], Tuple[int, int, int, int]]

PLAYER_IMAGE = "x-wing.png"
BACKGROUND_IMAGE = "background.png"


class Surface(Protocol):
    """2D drawing context the game renders into"""

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def fill_circle(self, x: float, y: float, r: float, color: Color) -> None: ...

    def blit(self, image: Any, x: float, y: float, w: float, h: float, alpha: int = 255) -> None: ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color,
        size: float,
        anchor_x: str = "left",
    ) -> None: ...


class Assets(Protocol):
    """Source of decoded images, looked up by file name"""

    def get(self, name: str) -> Optional[Any]: ...

    def ready(self, name: str) -> bool: ...


class NullAssets:
    """Asset provider with nothing loaded; everything draws as a placeholder"""

    def get(self, name: str) -> Optional[Any]:
        return None

    def ready(self, name: str) -> bool:
        return False

"""
Shared fakes: a surface that records draw calls and an in-memory asset set.
"""
import pytest

from game.xwing.game import Game
from game.xwing.storage import MemoryScoreStore


class RecordingSurface:
    """Surface that just remembers what was drawn, in order."""

    def __init__(self):
        self.calls = []

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, tuple(color)))

    def fill_circle(self, x, y, r, color):
        self.calls.append(("circle", x, y, r, tuple(color)))

    def blit(self, image, x, y, w, h, alpha=255):
        self.calls.append(("blit", image, x, y, w, h, alpha))

    def draw_text(self, text, x, y, color, size, anchor_x="left"):
        self.calls.append(("text", text, x, y, tuple(color), size, anchor_x))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]

    def texts(self):
        return [c[1] for c in self.of_kind("text")]


class FakeImage:
    def __init__(self, name, width=1768, height=500):
        self.name = name
        self.width = width
        self.height = height


class FakeAssets:
    """Every requested image is ready."""

    def __init__(self, width=1768, height=500):
        self.width = width
        self.height = height

    def get(self, name):
        return FakeImage(name, self.width, self.height)

    def ready(self, name):
        return True


class CountingStore(MemoryScoreStore):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.set_calls = 0

    def set(self, key, value):
        self.set_calls += 1
        super().set(key, value)


class FailingStore(MemoryScoreStore):
    def set(self, key, value):
        raise OSError("disk full")


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def game():
    """A seeded game already in the PLAYING state."""
    g = Game(seed=1234)
    g.reset()
    return g

"""
Play the X-Wing shooter in an arcade window

Usage:
    python -m game.xwing.play --assets-dir ./images
"""

import argparse

import arcade

from .arcade_surface import ArcadeAssets
from .config import GAME_CONFIG, WINDOW_CONFIG
from .game import Game
from .storage import JsonScoreStore
from .window import XWingWindow


def build_game(args) -> Game:
    config = dict(GAME_CONFIG)
    config["width"] = args.width
    config["height"] = args.height
    return Game(
        store=JsonScoreStore(args.store),
        assets=ArcadeAssets(args.assets_dir),
        seed=args.seed,
        **config,
    )


def main():
    parser = argparse.ArgumentParser(description="Play the X-Wing arcade shooter")
    parser.add_argument("--width", type=int, default=GAME_CONFIG["width"], help="Playfield width")
    parser.add_argument("--height", type=int, default=GAME_CONFIG["height"], help="Playfield height")
    parser.add_argument("--assets-dir", type=str, default=WINDOW_CONFIG["assets_dir"],
                        help="Directory holding x-wing.png and background.png")
    parser.add_argument("--store", type=str, default=WINDOW_CONFIG["store_path"],
                        help="JSON file the high score is kept in")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    game = build_game(args)
    # Textures are loaded by the asset provider before the window opens
    XWingWindow(game, title=WINDOW_CONFIG["title"])
    print("[play] Enter: start | Arrows: move | Z/X: fire | R: play again | Esc: quit")
    arcade.run()


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse

from jumperjonsey import config
from jumperjonsey.infra import log


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="jumperjonsey", description="Side-scrolling jump runner.")
    parser.add_argument("--width", type=int, default=config.DEFAULT_WIDTH, help="initial window width (px)")
    parser.add_argument("--height", type=int, default=config.DEFAULT_HEIGHT, help="initial window height (px)")
    parser.add_argument("--fps", type=int, default=config.FPS, help="target frame rate")
    parser.add_argument("--seed", type=int, default=config.SEED, help="obstacle RNG seed")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    args = parser.parse_args(argv)

    log.configure(args.log_level)

    # Imported late so --help works without a display.
    from jumperjonsey.app.game_app import GameApp

    GameApp(width=args.width, height=args.height, fps=args.fps, seed=args.seed).run()


if __name__ == "__main__":
    main()

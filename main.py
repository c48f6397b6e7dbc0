import argparse
import logging

from snake_game.config import CELL_SIZE, HIGHSCORE_FILE, TICK_DELAY_MS


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play snake on a wraparound grid.")
    parser.add_argument("--delay", type=int, default=TICK_DELAY_MS,
                        help="milliseconds between moves (default: %(default)s)")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="cell size in pixels (default: %(default)s)")
    parser.add_argument("--width", type=int, default=None,
                        help="board width in pixels, a multiple of the cell size")
    parser.add_argument("--height", type=int, default=None,
                        help="board height in pixels, a multiple of the cell size")
    parser.add_argument("--highscore-file", default=HIGHSCORE_FILE,
                        help="where the high score is kept (default: %(default)s)")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from snake_game.app import SnakeApp

    game = SnakeApp(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        delay=args.delay,
        highscore_file=args.highscore_file,
        muted=args.mute,
    )
    game.run()


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse

from .config import config_from_env
from .controller import RoundController, ScoreSink, SessionState
from .errors import ConfigError
from .geometry import Vec2
from .logsetup import configure_logging
from .trajectory import ShotState


class PrintSink(ScoreSink):
    def score_changed(self, score: int) -> None:
        print(f"SCORE: {score}")

    def game_won(self) -> None:
        print("YOU WON!")

    def game_lost(self) -> None:
        print("No room left to land. Game over.")


def main() -> None:
    parser = argparse.ArgumentParser(description='Bubble shooter in the terminal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the field and bullets')
    parser.add_argument('--width', type=int, default=None, help='Playfield width in bubbles')
    parser.add_argument('--height', type=int, default=None, help='Playfield height in rows')
    parser.add_argument('--rows', type=int, default=None, help='Number of rows filled at start')
    parser.add_argument('--play', action='store_true', help='Read targets from stdin and fire')
    parser.add_argument('--log-level', default=None, help='Logging level (default: BUBBLES_LOG_LEVEL or INFO)')
    args = parser.parse_args()

    configure_logging(args.log_level)
    try:
        config = config_from_env(width=args.width, height=args.height, filled_rows=args.rows, seed=args.seed)
    except ConfigError as exc:
        parser.error(str(exc))

    game = RoundController(config)
    game.subscribe(PrintSink())
    print('Initial field:')
    print(game.grid.pretty())
    if not args.play:
        return

    print(f"Gun sits at (0, 0); x spans [{-config.width / 2}, {config.width / 2}], y spans [0, {config.height}].")
    while game.state is SessionState.PLAYING:
        print(f"Next bullet: {game.bullet.color.name}")
        text = input('Aim at x y (q to quit): ').strip()
        if text.lower() in ('q', 'quit', 'exit'):
            break
        sep = ',' if ',' in text else ' '
        try:
            x_s, y_s = [t for t in text.split(sep) if t != '']
            target = Vec2(float(x_s), float(y_s))
        except ValueError:
            print('Could not parse. Try again.')
            continue
        game.aim(target)
        result = game.play_shot()
        if result is ShotState.OUT_OF_BOUNDS:
            print('Missed: the bullet left the field.')
        print(game.grid.pretty())
    print(f"Final score: {game.score}")


if __name__ == '__main__':
    main()

import argparse
from colorama import Fore, Style, init as colorama_init
from src.snake.game import SnakeGame
from src.snake import config


def main():
    parser = argparse.ArgumentParser(description="SnakeXenzia - desktop Snake on a checkerboard")
    parser.add_argument("--verbose", action="store_true", help="Print turns and (with verbose.ticks) every tick")
    parser.add_argument("--interval", type=int, default=None,
                        help=f"Tick interval in milliseconds (default {config.TICK_INTERVAL_MS})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    args = parser.parse_args()

    colorama_init(autoreset=True)
    def printer(msg: str) -> None:
        print(Fore.GREEN + "[game] " + Style.RESET_ALL + msg)

    print(Fore.GREEN + "SnakeXenzia ready. Arrow keys steer, SPACE starts a new game, ESC quits.")
    try:
        game = SnakeGame(tick_interval_ms=args.interval, seed=args.seed, printer=printer, verbose=args.verbose)
    except ValueError as e:
        parser.error(str(e))
    try:
        game.run()
    except KeyboardInterrupt:
        print()  # newline


if __name__ == "__main__":
    main()

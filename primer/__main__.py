"""
Primer Main Entry Point

Run demos, play tic-tac-toe or serve the API.

    python -m primer list [--category basics]
    python -m primer run arrays lists
    python -m primer run --all [--category oop]
    python -m primer play [--computer] [--seed 7]
    python -m primer serve [--host 0.0.0.0] [--port 8000]
"""

import sys
import argparse

from primer.core.config import load_config, set_config
from primer.core.constants import DemoCategory, DEMO_CATEGORY_NAMES, PROJECT_NAME, VERSION
from primer.core.exceptions import ConfigurationError, DemoError, GameAbortedError
from primer.core.logging_config import LogLevel, get_logger, level_for_flags, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="primer",
        description=f"{PROJECT_NAME} - runnable walkthroughs of core Python features",
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    parser.add_argument(
        "--time-scale",
        type=float,
        help="Multiplier for demo sleeps (0 runs threaded demos instantly)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )

    categories = [category.value for category in DemoCategory]
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List available demos")
    list_parser.add_argument("--category", choices=categories, help="Only this category")

    run_parser = subparsers.add_parser("run", help="Run one or more demos")
    run_parser.add_argument("names", nargs="*", metavar="NAME", help="Demo names")
    run_parser.add_argument("--all", action="store_true", help="Run the whole catalogue")
    run_parser.add_argument("--category", choices=categories, help="With --all, only this category")

    play_parser = subparsers.add_parser("play", help="Play tic-tac-toe")
    play_parser.add_argument("--computer", action="store_true", help="Play against the computer")
    play_parser.add_argument("--seed", type=int, help="Seed for the computer's random moves")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument("--host", type=str, help="Bind address (default from config)")
    serve_parser.add_argument("--port", type=int, help="Port (default from config)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    return parser


def cmd_list(args, config) -> int:
    from primer.demos import list_demos

    category = DemoCategory(args.category) if args.category else None
    current = None
    for entry in list_demos(category):
        if entry.category is not current:
            current = entry.category
            print(f"\n{DEMO_CATEGORY_NAMES[current]}")
        print(f"  {entry.name:<20} {entry.title}")
    return 0


def cmd_run(args, config) -> int:
    from primer.demos import run_all, run_demo

    if args.all:
        category = DemoCategory(args.category) if args.category else None
        run_all(config.demos, category)
        return 0

    if not args.names:
        print("Error: give at least one demo name or --all", file=sys.stderr)
        return 1

    for name in args.names:
        run_demo(name, config.demos)
    return 0


def cmd_play(args, config) -> int:
    from primer.games.tictactoe import ComputerPlayer, HumanPlayer, Mark, TicTacToe

    game = TicTacToe()
    vs_computer = args.computer or config.game.vs_computer
    seed = args.seed if args.seed is not None else config.game.seed

    if vs_computer:
        computer_mark = Mark(config.game.computer_mark)
        computer = ComputerPlayer(computer_mark, seed=seed)
        human = HumanPlayer(computer_mark.opponent)
        players = {computer_mark: computer, human.mark: human}
    else:
        players = {Mark.X: HumanPlayer(Mark.X), Mark.O: HumanPlayer(Mark.O)}

    try:
        game.play(players[Mark.X], players[Mark.O])
    except GameAbortedError:
        print("\nGame aborted.")
        return 1
    return 0


def cmd_serve(args, config) -> int:
    from primer.api import start_server

    host = args.host or config.api.host
    port = args.port or config.api.port
    print(f"Starting API server on http://{host}:{port}")
    start_server(host=host, port=port, reload=args.reload)
    return 0


COMMANDS = {
    "list": cmd_list,
    "run": cmd_run,
    "play": cmd_play,
    "serve": cmd_serve,
}


def main(argv=None) -> int:
    """Main entry point for Python Primer."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=level_for_flags(args.debug, args.quiet), verbose=args.debug)

    logger = get_logger("main")

    try:
        # An explicit --config must exist; the default path may be absent
        config = load_config(args.config, required=args.config is not None)
        if args.time_scale is not None:
            config.demos.time_scale = args.time_scale
            config.demos.validate()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    set_config(config)

    if config.verbose_logging and not (args.debug or args.quiet):
        setup_logging(level=LogLevel.INFO, log_file=config.logs_dir / "primer.log")
        logger.info(f"Logging to {config.logs_dir / 'primer.log'}")

    try:
        return COMMANDS[args.command](args, config)
    except DemoError as e:
        logger.error(str(e))
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())

# guessing_game.py
# Command-line entry point for the number guessing game

from dataclasses import replace
from datetime import datetime
from typing import List, Optional
import argparse
import json
import logging
import sys

from app_context import AppContext
from exit_codes import ExitCode, GameError, Severity
from game_config import CONFIG_FILE, load_config
from game_console import Console
from game_log import LOG_DATE_FORMAT, SUCCESS, configure_logging
from game_menu import MenuController
from leaderboard import SCOREBOARD_FILE, Leaderboard

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Guess the hidden number in as few tries as possible.")
    p.add_argument('--config', default=CONFIG_FILE, help=f'Path to the key = value config file (default: {CONFIG_FILE})')
    p.add_argument('--scoreboard', default=SCOREBOARD_FILE, help=f'Path to the scoreboard file (default: {SCOREBOARD_FILE})')
    p.add_argument('--log-dir', default='.', help='Directory for the per-run log file (default: current directory)')
    p.add_argument('--debug', action='store_true', help='Echo log lines to the terminal regardless of the config file')

    # non-interactive scoreboard listing
    p.add_argument('--show-scoreboard', action='store_true', help='Print the best players and exit')
    p.add_argument('--top', type=int, default=None, help='Number of rows to show (overrides sb_rec_nr)')
    p.add_argument('--format', choices=['text', 'json'], default='text', help='Output format for --show-scoreboard')
    return p.parse_args(argv)


def build_context(args: argparse.Namespace, console: Console) -> AppContext:
    """Load config and scoreboard; raises GameError if either is unusable."""
    config = load_config(args.config)
    if args.debug and not config.debug:
        config = replace(config, debug=True)
    console.debug = config.debug
    leaderboard = Leaderboard(args.scoreboard, console=console)
    leaderboard.load()
    return AppContext(config=config, leaderboard=leaderboard, console=console)


def run(ctx: AppContext) -> ExitCode:
    """Run the menu loop once and turn however it ended into an exit code."""
    try:
        return MenuController(ctx).run()
    except (KeyboardInterrupt, EOFError):
        logger.warning("interrupted by user")
        return ExitCode.INTERRUPT
    except GameError as e:
        logger.error("%s", e)
        return e.exit_code


def shutdown(exit_code: ExitCode, console: Console, clear: bool = True) -> int:
    """Log the outcome with its severity and return the process exit status."""
    if clear:
        console.clear()
    severity = exit_code.severity
    if severity is Severity.SUCCESS:
        logger.log(SUCCESS, "clean exit")
    elif severity is Severity.INTERRUPTED:
        logger.warning("%s", exit_code.describe())
    else:
        logger.error("%s", exit_code.describe())
    return exit_code.process_status


def print_scoreboard(ctx: AppContext, n: int, fmt: str = 'text') -> None:
    if fmt == 'json':
        rows = [{'position': pos, 'name': name, 'tries': tries}
                for pos, (name, tries) in enumerate(ctx.leaderboard.top(n), start=1)]
        print(json.dumps(rows, indent=2))
    else:
        ctx.leaderboard.render(n)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    session_start = datetime.now().strftime(LOG_DATE_FORMAT)
    configure_logging(args.log_dir, session_start, debug=args.debug)

    console = Console(debug=args.debug)
    try:
        ctx = build_context(args, console)
    except GameError as e:
        status = shutdown(e.exit_code, console)
        print(f"Error: {e}", file=sys.stderr)
        return status
    except KeyboardInterrupt:
        return shutdown(ExitCode.INTERRUPT, console)

    if ctx.config.debug and not args.debug:
        configure_logging(args.log_dir, session_start, debug=True)

    if args.show_scoreboard:
        n = args.top if args.top is not None else ctx.config.scoreboard_display_count
        print_scoreboard(ctx, n, args.format)
        # no screen clear: stdout carries the listing
        return shutdown(ExitCode.SUCCESS, ctx.console, clear=False)

    return shutdown(run(ctx), ctx.console)


if __name__ == '__main__':
    sys.exit(main())

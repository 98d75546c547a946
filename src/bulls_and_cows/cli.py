# Area: Shared
"""
bulls_and_cows.cli — Command-line interface
===========================================

Provides the CLI entry point for playing in a terminal.

Usage:
    bulls-and-cows                          # Play with defaults
    bulls-and-cows --name Ann --seed 42     # Fixed name and secret sequence
    python -m bulls_and_cows --config config.json

Settings can also come from a .env file or environment variables
(BULLS_AND_COWS_PLAYER_NAME, BULLS_AND_COWS_SEED, ...).
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from ._commands import build_default_chain
from ._game_config import GameConfig, load_config
from ._shared import log_error, setup_logging
from .errors import ConfigurationError
from .game import BullsAndCowsGame
from .printer import ConsolePrinter
from .random_provider import DefaultRandomNumberProvider

logger = logging.getLogger("bulls_and_cows.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="bulls-and-cows",
        description="Bulls and Cows - guess the secret 4-digit number",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands during the game:
  <4 digits>   make a guess
  help         reveal one digit of the secret
  top          show the scoreboard
  restart      start a new game
  exit         quit
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--name", type=str, help="Player name (skips the prompt)")
    parser.add_argument("--seed", type=int, help="Seed for the random number source")
    parser.add_argument("--log-file", type=str, help="Path to the JSON log file")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show log messages on the terminal",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    return parser.parse_args(argv)


def config_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Map CLI flags onto GameConfig fields."""
    overrides: Dict[str, Any] = {
        "player_name": args.name,
        "seed": args.seed,
        "log_file": args.log_file,
    }
    if args.no_color:
        overrides["use_colors"] = False
    return overrides


def create_game(config: GameConfig) -> BullsAndCowsGame:
    """Wire a console game from configuration."""
    return BullsAndCowsGame(
        random_provider=DefaultRandomNumberProvider(config.seed),
        printer=ConsolePrinter(
            use_colors=config.use_colors,
            leaderboard_size=config.leaderboard_size,
        ),
        command_chain=build_default_chain(),
        player_name=config.player_name,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config, config_overrides(args))
    except ConfigurationError as e:
        print(f"Error: {e.format_error_log()}", file=sys.stderr)
        return 1

    level = getattr(logging, config.log_level)
    setup_logging(
        log_file_path=config.log_file,
        level=level,
        terminal_level=level if args.verbose else logging.WARNING,
        use_colors=config.use_colors,
    )

    try:
        game = create_game(config)
    except ConfigurationError as e:
        log_error(e)
        return 1

    try:
        game.run()
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted by user")
    return 0

# Area: Runner
"""
cup_game.cli — Command-line interface
======================================

Provides CLI entry point for playing rounds in a terminal.

Usage:
    python -m cup_game --demo                    # Play against the demo RGS
    python -m cup_game --config config.json      # Play against a real RGS

Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Config key: demo_mode: True
    3. Environment variable: DEMO_MODE=true
"""

import argparse
import sys
from typing import List, Optional

from ._config import load_config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Cup game - pick the container hiding the marker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m cup_game --demo
  python -m cup_game --config config.json
  RGS_URL=https://rgs.example.com RGS_SESSION_ID=abc python -m cup_game
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play against the in-process demo RGS (no server needed)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to a .env file (default: search from the current directory)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    config = load_config(args.config, env_file=args.env_file)
    if args.demo:
        config["demo_mode"] = True

    # Import runner here so --help stays fast
    from .runner import GameRunner

    try:
        runner = GameRunner(config=config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Set via config file or environment variables, or use --demo.", file=sys.stderr)
        return 1

    runner.run()
    return 0

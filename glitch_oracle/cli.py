"""
glitch-oracle — Cast an I-Ching hexagram from battery level and clock entropy.

Usage:
    glitch-oracle                 # draw from device entropy
    glitch-oracle --seed 42       # reproducible draw
    glitch-oracle --json --save readings.jsonl
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .display import ReadingDisplay
from .engine import Reading
from .entropy import DEFAULT_DELAY_SECONDS, EntropySource
from .errors import EntropyUnavailable, GlitchOracleError
from .oracle import Oracle

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glitch-oracle",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Use a specific seed (bypasses battery/clock entropy)'
    )
    parser.add_argument(
        '--delay',
        type=float,
        default=DEFAULT_DELAY_SECONDS,
        help=f'Seconds to pause while "processing" (default: {DEFAULT_DELAY_SECONDS})'
    )
    parser.add_argument(
        '--plain',
        action='store_true',
        help='Plain text output without colors or panels'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the reading as JSON'
    )
    parser.add_argument(
        '--save',
        help='Save reading to a JSON file (appends for .jsonl)'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity (default: WARNING)'
    )
    return parser


def save_reading(reading: Reading, path: Path) -> None:
    save_data = reading.to_dict()
    if path.suffix.lower() == '.jsonl':
        with open(path, 'a', encoding='utf-8') as f:
            f.write(json.dumps(save_data, ensure_ascii=False) + '\n')
    else:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(save_data, f, ensure_ascii=False, indent=2)


def cast(oracle: Oracle, seed: Optional[int], console: Console, quiet: bool) -> Reading:
    if seed is not None:
        return oracle.cast_seed(seed)
    if quiet:
        return asyncio.run(oracle.cast())
    with console.status("[bold green]Glitching the oracle...[/bold green]", spinner="dots"):
        return asyncio.run(oracle.cast())


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s: %(message)s')

    console = Console()
    oracle = Oracle(EntropySource(delay=max(args.delay, 0.0)))

    try:
        reading = cast(oracle, args.seed, console, quiet=args.plain or args.json)
    except EntropyUnavailable as e:
        print(f"Error: {e} Press again to retry.", file=sys.stderr)
        return 1
    except GlitchOracleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(reading.to_dict(), ensure_ascii=False))
    else:
        display = ReadingDisplay(console)
        if args.plain:
            display.print_plain(reading)
        else:
            display.print_rich(reading)

    if args.save:
        save_path = Path(args.save)
        try:
            save_reading(reading, save_path)
        except OSError as e:
            logger.error(f"Failed to save reading: {e}")
            return 1
        if not args.json:
            print(f"Reading saved to {save_path}")
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nDivination cancelled.")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()

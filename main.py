#!/usr/bin/env python3
"""
Minefield - terminal entry point.

Usage:
    python main.py [--rows N] [--columns N] [--seed S] [--verbose]

Commands during play:
    dig <cell>   (d)   open a cell, e.g. "dig a1"
    flag <cell>  (f)   flag or unflag a cell
    exit         (e, quit, q)
"""
import argparse
import logging
import sys

from src.minefield import DEFAULT, Board, BoardConfig, Session


def main() -> int:
    """Parse arguments and run a game."""
    parser = argparse.ArgumentParser(
        description="Minefield - dig for safe cells in a text grid"
    )
    parser.add_argument(
        "--rows", type=int, default=DEFAULT.rows, help="Number of rows (max 26)"
    )
    parser.add_argument(
        "--columns", type=int, default=DEFAULT.columns, help="Number of columns"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug messages to stderr"
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    try:
        board = Board(BoardConfig(args.rows, args.columns, args.seed))
    except ValueError as exc:
        parser.error(str(exc))

    return Session(board).run()


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py generate [--preset {beginner,intermediate,expert}] [--seed N]
    python main.py generate --height H --width W --mines N [--seed N]
    python main.py locate X Y --surface W H [--height H] [--width W] [--cell-size S]
"""
import argparse

from src.minefield.board import BEGINNER, PRESETS, BoardConfig
from src.minefield.errors import InvalidConfiguration
from src.minefield.generator import generate_from_config
from src.minefield.pointer import map_pointer
from src.minefield.render import render_board


def _board_config(args: argparse.Namespace) -> BoardConfig:
    """Build a configuration from a preset, overridden by explicit sizes."""
    base = PRESETS[args.preset]
    return BoardConfig(
        height=args.height if args.height is not None else base.height,
        width=args.width if args.width is not None else base.width,
        num_mines=args.mines if args.mines is not None else base.num_mines,
    )


def generate(args: argparse.Namespace) -> None:
    """Generate a board and print it."""
    config = _board_config(args)
    board = generate_from_config(config, args.seed)
    print(render_board(board))


def locate(args: argparse.Namespace) -> None:
    """Map a pointer position to a board cell and print it."""
    coord = map_pointer(
        (args.x, args.y),
        tuple(args.surface),
        args.height,
        args.width,
        args.cell_size,
    )
    row, col = coord
    on_board = 0 <= row < args.height and 0 <= col < args.width
    suffix = "" if on_board else " (off-board)"
    print(f"({row}, {col}){suffix}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Generate Minesweeper boards"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate a random board")
    gen_parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="beginner",
        help="Difficulty preset",
    )
    gen_parser.add_argument("--height", type=int, help="Number of rows")
    gen_parser.add_argument("--width", type=int, help="Number of columns")
    gen_parser.add_argument("--mines", type=int, help="Number of mines")
    gen_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducibility"
    )

    # Locate command
    locate_parser = subparsers.add_parser(
        "locate", help="Map a pointer position to a board cell"
    )
    locate_parser.add_argument("x", type=float, help="Pointer x on the surface")
    locate_parser.add_argument("y", type=float, help="Pointer y on the surface")
    locate_parser.add_argument(
        "--surface",
        type=float,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=(800.0, 600.0),
        help="Surface size",
    )
    locate_parser.add_argument(
        "--height", type=int, default=BEGINNER.height, help="Number of rows"
    )
    locate_parser.add_argument(
        "--width", type=int, default=BEGINNER.width, help="Number of columns"
    )
    locate_parser.add_argument(
        "--cell-size", type=float, default=32.0, help="Cell edge length"
    )

    args = parser.parse_args()

    try:
        if args.command == "generate":
            generate(args)
        elif args.command == "locate":
            locate(args)
        else:
            parser.print_help()
    except InvalidConfiguration as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()

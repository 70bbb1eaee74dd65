"""Command-line entry point for pixstyle.

This tool loads an image, applies one of the artistic styles and writes
the result as PNG, or prints it as a data URI for text-only consumers.

All processing occurs on NumPy arrays; Pillow is used only for decoding
and encoding.

Usage example:
    python -m pixstyle.main -i input.jpg -o output.png --style vangogh
    python -m pixstyle.main -i input.jpg --style cyberpunk --data-uri
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .styles import STYLES, available_styles
from .transfer import process_image_style
from .utils.xorshift import DEFAULT_SEED

log = logging.getLogger("pixstyle")


def setup_logging(verbosity: int = 0) -> None:
    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(verbosity, 2)]
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="pixstyle",
        description=(
            "Apply deterministic artistic styles (painterly strokes, posterized "
            "blocks, neon grade) to an image."
        ),
    )

    parser.add_argument("-i", "--input", help="Path to input image file")
    parser.add_argument("-o", "--output", help="Path to output PNG file")
    parser.add_argument(
        "-s",
        "--style",
        type=str,
        default="vangogh",
        choices=available_styles(),
        help="Style to apply: " + " | ".join(available_styles()),
    )
    parser.add_argument(
        "--seed",
        type=lambda s: int(s, 0),
        default=DEFAULT_SEED,
        help="Dither seed (decimal or 0x-prefixed hex, non-zero).",
    )
    parser.add_argument(
        "--data-uri",
        action="store_true",
        help="Print the result as a data:image/png;base64 URI on stdout.",
    )
    parser.add_argument("--list-styles", action="store_true", help="List available styles and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs."""
    if ns.list_styles:
        return
    if not ns.input:
        raise ValueError("--input is required")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if not ns.output and not ns.data_uri:
        raise ValueError("give --output and/or --data-uri")
    if ns.seed & 0xFFFFFFFFFFFFFFFF == 0:
        raise ValueError("--seed must be non-zero")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Returns
    -------
    int
        Exit status code (0 success, 1 processing failure, 2 bad arguments).
    """
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    if args.list_styles:
        for info in STYLES.values():
            print(f"{info.id:<10} {info.name:<10} {info.description}")
        return 0

    data = Path(args.input).read_bytes()
    result = process_image_style(data, args.style, seed=args.seed)
    if not result.success:
        print(result.message)
        return 1

    if args.output:
        Path(args.output).write_bytes(result.payload)
        log.info("Saved %s", args.output)
    if args.data_uri:
        print(result.to_dict()["processed_image_data"])
    else:
        print(result.message)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

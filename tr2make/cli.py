# SPDX-License-Identifier: MIT
"""Command-line interface for tr2make."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tr2make.core.config import BuildModel, load_config
from tr2make.core.errors import Tr2MakeError
from tr2make.core.plan import derive_plan
from tr2make.generators.makefile import MakefileGenerator

# Set up logging
logger = logging.getLogger("tr2make")

BANNER = r"""
 _____      ____   __  __         _
|_   _|_ __|___ \ |  \/  |  __ _ | | __ ___
  | | | '__| __) || |\/| | / _` || |/ // _ \
  | | | |   / __/ | |  | || (_| ||   <|  __/
  |_| |_|  |_____||_|  |_| \__,_||_|\_\\___|"""

MODEL_CHOICES = [m.value for m in BuildModel]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def generate(model: BuildModel, config_path: Path | None = None) -> Path:
    """Load the project configuration and write its Makefile.

    Args:
        model: Build mode to generate for.
        config_path: Configuration file (default: ``.tr2make`` in the cwd).

    Returns:
        Path of the generated Makefile.

    Raises:
        Tr2MakeError: If any step fails. Nothing is written unless
            loading and derivation succeed.
    """
    config = load_config(config_path)
    plan = derive_plan(config, model)
    logger.info(
        "Generating %s build for %s (%s, %s)",
        model,
        config.target,
        plan.compiler,
        plan.architecture,
    )
    return MakefileGenerator().generate(plan, plan.output_dir)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from tr2make import __version__

    parser = argparse.ArgumentParser(
        prog="tr2make",
        description=BANNER,
        epilog="Reads .tr2make from the current directory and writes "
        "build/<model>-<architecture>/Makefile.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "model",
        nargs="?",
        type=str.lower,
        choices=MODEL_CHOICES,
        help="Build model (default: debug)",
    )
    parser.add_argument(
        "-m",
        "--model",
        dest="model_option",
        metavar="MODEL",
        type=str.lower,
        choices=MODEL_CHOICES,
        help="Build model, same as the positional argument",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the tr2make CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.model and args.model_option and args.model != args.model_option:
        parser.error(
            f"conflicting build models: {args.model!r} and {args.model_option!r}"
        )
    model_name = args.model or args.model_option or BuildModel.DEBUG.value

    setup_logging(args.verbose)

    try:
        makefile = generate(BuildModel.from_name(model_name))
    except Tr2MakeError as e:
        logger.error("%s", e)
        return 1

    print(f"Makefile generated at: {makefile}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

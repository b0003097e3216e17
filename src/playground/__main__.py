"""Main entry point for Playground.

This module is executed when running:
- python -m playground
- playground (via pyproject.toml entry point)
"""

import argparse
import sys

from . import __version__, log
from .config import Config


def _parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Declarative view and data binding playgrounds"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yml (default: search ./, package dir, ~/.playground/)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Configure logging, load the config and run the GUI."""
    args = _parse_arguments(argv)

    # Configure with the flag first so config loading is logged too
    log.configure(debug=args.debug)
    config = Config.load(args.config)
    if not args.debug:
        log.configure(level=config.log_level)

    logger = log.get_logger()
    logger.info(f"playground v{__version__}")

    # Imported late so --help and --version work without a display
    from .gui import run

    return run(config)


if __name__ == "__main__":
    sys.exit(main())

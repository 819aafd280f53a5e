#!/usr/bin/env python3
"""
FEATNORM - Min-max normalization of command line values

Usage:
    python scripts/normalize_values.py 1 2 3
    python scripts/normalize_values.py 10 NA 20 30 --low 0 --high 100
    python scripts/normalize_values.py --verbose -- -5 0 5
"""

import argparse
import logging
import math
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from featnorm.core.config import get_settings
from featnorm.core.constants import MISSING_OUTPUT, MISSING_TOKENS
from featnorm.core.exceptions import FeatnormError
from featnorm.normalization.methods import normalize

# Load environment
load_dotenv(PROJECT_ROOT / ".env")


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_token(token: str) -> float | None:
    """Parse one value; missing tokens (NA, NaN, None, null, -) give None."""
    if token.strip().lower() in MISSING_TOKENS:
        return None
    value = float(token)
    return None if math.isnan(value) else value


def format_value(value: float | None) -> str:
    """Format one normalized value for output."""
    if value is None:
        return MISSING_OUTPUT
    return repr(value)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="FEATNORM - Min-max normalization onto [low, high]",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/normalize_values.py 1 2 3
    python scripts/normalize_values.py 10 NA 20 30 --low 0 --high 100

Missing values: NA, NaN, None, null or - (case-insensitive).
        """,
    )

    parser.add_argument(
        "values",
        nargs="+",
        help="Values to normalize",
    )

    parser.add_argument(
        "--low", "-l",
        type=float,
        default=settings.default_low,
        help=f"Lower bound of the output range (default {settings.default_low})",
    )

    parser.add_argument(
        "--high", "-u",
        type=float,
        default=settings.default_high,
        help=f"Upper bound of the output range (default {settings.default_high})",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging("DEBUG" if args.verbose else get_settings().log_level)
    logger = logging.getLogger(__name__)

    try:
        values = [parse_token(token) for token in args.values]
    except ValueError as e:
        logger.error(f"Invalid value: {e}")
        return 1

    logger.debug(f"Normalizing {len(values)} value(s) onto [{args.low}, {args.high}]")

    try:
        result = normalize(values, args.low, args.high)
    except FeatnormError as e:
        logger.error(f"Normalization failed: {e}")
        return 1

    for value in result:
        print(format_value(value))

    return 0


if __name__ == "__main__":
    sys.exit(main())

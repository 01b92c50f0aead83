import argparse
import json
from pathlib import Path
from typing import List, Optional

from . import __version__
from .env import Settings, load_env, load_settings
from .logger import LOG_LEVELS, get_logger, reset_logger
from .matching.fragments import FRAGMENT_ORDERS, INTERLEAVED
from .matching.ranking import group_tiers
from .matching.resolver import run
from .matching.scoring import ScoredResult
from .schema import InvalidInput
from .storage import CatalogUnavailable, load_catalog


class ArgumentParseError(Exception):
    """Raised instead of argparse's own exit when the command line is malformed."""
    pass


class MatchArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentParseError(message)


def _tier_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"range must be an integer, got {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"range must not be negative, got {count}")
    return count


def format_results(results: List[ScoredResult]) -> List[str]:
    lines: List[str] = []
    for tier in group_tiers(results):
        lines.append("")
        lines.append(f"Rank tier: {tier.score}")
        lines.extend(tier.labels)
    return lines


def format_results_json(results: List[ScoredResult]) -> str:
    return json.dumps([{"label": r.label, "score": r.score} for r in results], indent=2)


def cmd_match(args: argparse.Namespace, settings: Settings) -> None:
    catalog_path = Path(args.catalog) if args.catalog else settings.catalog_path
    bonus = args.bonus if args.bonus is not None else settings.bonus
    logger = get_logger()

    candidates = load_catalog(catalog_path)
    logger.debug("Catalog loaded", path=str(catalog_path), candidates=len(candidates))

    results = run(args.names, candidates, args.range, bonus=bonus, order=args.order)
    if args.json:
        print(format_results_json(results))
        return
    for line in format_results(results):
        print(line)


def build_parser() -> MatchArgumentParser:
    parser = MatchArgumentParser(
        prog="animalmatch",
        description="Rank animals whose names share fragments with the given names",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--catalog", help="Path to a newline-delimited animal catalog (default: bundled list)")
    parser.add_argument("--bonus", type=int, help="Points for a candidate's first match (default: 5)")
    parser.add_argument(
        "--order",
        choices=FRAGMENT_ORDERS,
        default=INTERLEAVED,
        help="Fragment order across several names (default: interleaved)",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON instead of rank tiers")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: WARNING, or ANIMALMATCH_LOG_LEVEL)",
    )
    parser.add_argument("range", type=_tier_count, help="Number of rank tiers to print")
    parser.add_argument("names", nargs="+", help="One or more names to match")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    # Load .env if present (ANIMALMATCH_CATALOG, ANIMALMATCH_BONUS, ...)
    load_env()
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"Configuration error: {e}")

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentParseError as e:
        raise SystemExit(f"Problem reading arguments: {e}\n{parser.format_usage().strip()}")

    reset_logger()
    logger = get_logger(
        level=args.log_level or settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_dir is not None,
    )

    try:
        cmd_match(args, settings)
    except (CatalogUnavailable, InvalidInput, ValueError) as e:
        logger.record_error(type(e).__name__)
        logger.error("Match failed", error=str(e))
        raise SystemExit(f"Application error: {e}")
    finally:
        logger.log_metrics_summary()


if __name__ == "__main__":
    main()

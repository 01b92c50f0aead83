"""
Animal Match Orchestrator.

Responsibilities:
- Validate and normalize query names.
- Drive fragment generation, candidate matching and score accumulation.
- Rank the accumulated results and optionally window them by tier.

Non-Responsibilities:
- No catalog loading.
- No argument parsing.
- No printing.

Invariant:
This module must be deterministic given the same inputs. Every call builds
its own accumulator; nothing is shared between calls.
"""

from typing import List, Sequence, Union

from ..logger import get_logger
from ..normalize import normalize_candidate, normalize_name
from ..schema import require_valid_names
from ..storage import parse_catalog
from .fragments import INTERLEAVED, build_fragments
from .ranking import order_results, window_results
from .scoring import FIRST_MATCH_BONUS, ScoreAccumulator, ScoredResult

Catalog = Union[str, Sequence[str]]


def _as_candidates(catalog: Catalog) -> Sequence[str]:
    if isinstance(catalog, str):
        return parse_catalog(catalog)
    return [c for c in (normalize_candidate(line) for line in catalog) if c]


def find_animals(
    names: Sequence[str],
    catalog: Catalog,
    bonus: int = FIRST_MATCH_BONUS,
    order: str = INTERLEAVED,
) -> List[ScoredResult]:
    """
    Match ``names`` against ``catalog`` and return every hit ranked by score.

    Args:
        names: Query names (non-empty strings, any case)
        catalog: Newline-delimited text block or a sequence of candidate lines
        bonus: Points added the first time a candidate matches any fragment
        order: Fragment order, "interleaved" (default) or "sequential"

    Returns:
        ScoredResults ordered by descending score

    Raises:
        InvalidInput: If names is empty or contains an empty name
    """
    logger = get_logger()
    require_valid_names(names)

    normalized = [normalize_name(n) for n in names]
    candidates = _as_candidates(catalog)
    logger.record_query()
    logger.debug("Matching names", names=normalized, candidates=len(candidates), order=order)

    accumulator = ScoreAccumulator(bonus=bonus)
    for fragment in build_fragments(normalized, order=order):
        matched = accumulator.add_fragment(fragment, candidates)
        logger.record_fragment(matched)
        if matched:
            logger.debug("Fragment matched", fragment=fragment, matched=matched)

    ranked = order_results(accumulator.results())
    logger.info("Query complete", names=normalized, results=len(ranked))
    return ranked


def run(
    names: Sequence[str],
    catalog: Catalog,
    limit: int,
    bonus: int = FIRST_MATCH_BONUS,
    order: str = INTERLEAVED,
) -> List[ScoredResult]:
    """Ranked matches trimmed to the top ``limit`` score tiers."""
    return window_results(find_animals(names, catalog, bonus=bonus, order=order), limit)

"""
Ranking and windowing of scored results.

Responsibilities:
- Order results by descending score.
- Window an ordered sequence by distinct score tiers, not item count.
- Group a windowed sequence into rank tiers for presentation.

Non-Responsibilities:
- No scoring.
- No printing.

Invariant:
Equal scores are never merged; every result stays a distinct entry.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from .scoring import ScoredResult


@dataclass
class RankTier:
    score: int
    labels: List[str] = field(default_factory=list)


def order_results(results: Iterable[ScoredResult]) -> List[ScoredResult]:
    # sorted() is stable: ties keep first-insertion order
    return sorted(results, key=lambda r: r.score, reverse=True)


def window_results(results: Iterable[ScoredResult], limit: int) -> List[ScoredResult]:
    """
    Keep the leading results spanning at most ``limit`` distinct score tiers.

    ``results`` must already be ordered. The tier sentinel starts at 0, so the
    first non-zero score always opens a tier. Zero-score results are never
    emitted.
    """
    if limit <= 0:
        return []

    windowed: List[ScoredResult] = []
    current = 0
    tiers = 0
    for result in results:
        if result.score == 0:
            continue
        if result.score != current:
            tiers += 1
            if tiers > limit:
                break
            current = result.score
        windowed.append(result)
    return windowed


def group_tiers(results: Iterable[ScoredResult]) -> List[RankTier]:
    tiers: List[RankTier] = []
    for result in results:
        if not tiers or tiers[-1].score != result.score:
            tiers.append(RankTier(score=result.score))
        tiers[-1].labels.append(result.label)
    return tiers

from .fragments import build_fragments
from .ranking import RankTier, group_tiers, order_results, window_results
from .resolver import find_animals, run
from .scoring import FIRST_MATCH_BONUS, ScoreAccumulator, ScoredResult, annotate

__all__ = [
    "FIRST_MATCH_BONUS",
    "RankTier",
    "ScoreAccumulator",
    "ScoredResult",
    "annotate",
    "build_fragments",
    "find_animals",
    "group_tiers",
    "order_results",
    "run",
    "window_results",
]

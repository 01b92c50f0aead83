"""
Scoring Logic for fragment matches.

Responsibilities:
- Fold per-fragment matches into one result per candidate identity.
- Award fragment-length points plus a one-time first-match bonus.
- Annotate labels by upper-casing matched fragments.

Non-Responsibilities:
- No fragment generation.
- No ordering or windowing.
- No I/O.

Invariant:
At most one ScoredResult exists per case-insensitive candidate identity.
Given identical fragments in identical order, labels and scores are identical.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Set

from ..normalize import candidate_identity
from .candidates import find_candidates

FIRST_MATCH_BONUS = 5


@dataclass
class ScoredResult:
    label: str
    score: int

    @property
    def identity(self) -> str:
        return candidate_identity(self.label)

    def as_tuple(self):
        return (self.label, self.score)


def annotate(text: str, fragment: str) -> str:
    """
    Upper-case the first occurrence of ``fragment`` in ``text``.

    The search is case-sensitive against the current text, so a region that
    an earlier (longer) fragment already upper-cased is not matched again;
    the next lower-case occurrence is marked instead, or nothing at all.
    """
    return text.replace(fragment, fragment.upper(), 1)


class ScoreAccumulator:
    """
    Running per-query result set keyed by candidate identity.

    A fresh accumulator must be used for every query; the bonus set and
    results are not meant to survive across queries.
    """

    def __init__(self, bonus: int = FIRST_MATCH_BONUS):
        if bonus < 0:
            raise ValueError(f"bonus must be non-negative, got {bonus}")
        self.bonus = bonus
        self._results: Dict[str, ScoredResult] = {}
        self._bonused: Set[str] = set()

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, candidate: str) -> bool:
        return candidate_identity(candidate) in self._results

    def points_for(self, identity: str, fragment: str) -> int:
        points = len(fragment)
        if identity not in self._bonused:
            self._bonused.add(identity)
            points += self.bonus
        return points

    def add_match(self, candidate: str, fragment: str) -> ScoredResult:
        identity = candidate_identity(candidate)
        points = self.points_for(identity, fragment)

        existing = self._results.get(identity)
        if existing is None:
            result = ScoredResult(label=annotate(candidate, fragment), score=points)
            self._results[identity] = result
            return result

        existing.label = annotate(existing.label, fragment)
        existing.score += points
        return existing

    def add_fragment(self, fragment: str, candidates: Sequence[str]) -> int:
        """Match one fragment against the catalog and fold every hit. Returns the hit count."""
        matched = find_candidates(fragment, candidates)
        for candidate in matched:
            self.add_match(candidate, fragment)
        return len(matched)

    def accumulate(self, fragments: Iterable[str], candidates: Sequence[str]) -> "ScoreAccumulator":
        for fragment in fragments:
            self.add_fragment(fragment, candidates)
        return self

    def results(self) -> List[ScoredResult]:
        """Results in first-insertion order (unranked)."""
        return list(self._results.values())

"""
Tests for candidate matching, annotation and score accumulation.
"""

import pytest

from animalmatch.matching.candidates import find_candidates
from animalmatch.matching.scoring import (
    FIRST_MATCH_BONUS,
    ScoreAccumulator,
    ScoredResult,
    annotate,
)


class TestFindCandidates:
    """Substring selection from the catalog."""

    def test_contiguous_substring(self, small_catalog):
        """Only candidates containing the fragment are returned."""
        assert find_candidates("cat", small_catalog) == ["cat", "bobcat", "cattle"]

    def test_case_insensitive(self, small_catalog):
        """Mixed-case fragments still match lower-case candidates."""
        assert find_candidates("BaT", small_catalog) == ["wombat", "bat"]

    def test_no_match(self, small_catalog):
        """Unmatched fragments give an empty list."""
        assert find_candidates("zebra", small_catalog) == []

    def test_empty_catalog(self):
        """An empty catalog is not an error."""
        assert find_candidates("a", []) == []


class TestAnnotate:
    """Upper-casing matched regions."""

    def test_first_occurrence_only(self):
        """Only the first occurrence is marked."""
        assert annotate("banana", "an") == "bANana"

    def test_already_marked_region_not_found(self):
        """An upper-cased region no longer matches a lower-case fragment."""
        assert annotate("CATtle", "ca") == "CATtle"

    def test_marks_next_lowercase_occurrence(self):
        """The next lower-case occurrence gets marked instead."""
        assert annotate("CATcat", "cat") == "CATCAT"


class TestScoreAccumulator:
    """Folding matches into one result per identity."""

    def test_first_match_gets_bonus(self):
        """Fragment length plus the bonus on first sight."""
        acc = ScoreAccumulator()
        result = acc.add_match("cattle", "cattle")
        assert result.score == 6 + FIRST_MATCH_BONUS
        assert result.label == "CATTLE"

    def test_bonus_awarded_once(self):
        """Later matches add only the fragment length."""
        acc = ScoreAccumulator()
        acc.add_match("cattle", "cat")
        result = acc.add_match("cattle", "tle")
        assert result.score == 3 + FIRST_MATCH_BONUS + 3
        assert result.label == "CATTLE"

    def test_annotation_accumulates(self):
        """Each match re-annotates the current label."""
        acc = ScoreAccumulator()
        acc.add_match("wombat", "bat")
        result = acc.add_match("wombat", "w")
        assert result.label == "WomBAT"

    def test_no_duplicate_identities(self):
        """Candidates differing only in case are merged."""
        acc = ScoreAccumulator()
        acc.add_match("cat", "cat")
        acc.add_match("CAT", "c")
        assert len(acc) == 1
        assert acc.results()[0].score == 3 + FIRST_MATCH_BONUS + 1

    def test_custom_bonus(self):
        """The bonus is configurable."""
        acc = ScoreAccumulator(bonus=0)
        assert acc.add_match("dog", "do").score == 2

    def test_negative_bonus_rejected(self):
        """Scores must stay non-negative."""
        with pytest.raises(ValueError):
            ScoreAccumulator(bonus=-1)

    def test_add_fragment_counts_hits(self, small_catalog):
        """add_fragment reports how many candidates matched."""
        acc = ScoreAccumulator()
        assert acc.add_fragment("bat", small_catalog) == 2
        assert "wombat" in acc
        assert "WOMBAT" in acc
        assert "cat" not in acc

    def test_accumulate_cat_query(self, small_catalog):
        """Full fold of 'cat' prefixes over the small catalog."""
        acc = ScoreAccumulator().accumulate(["cat", "ca", "c"], small_catalog)
        results = {r.identity: r.as_tuple() for r in acc.results()}
        assert results == {
            "cat": ("CAT", 11),
            "bobcat": ("bobCAT", 11),
            "cattle": ("CATtle", 11),
        }

    def test_results_in_insertion_order(self, small_catalog):
        """Unranked results keep first-match order."""
        acc = ScoreAccumulator().accumulate(["bat", "dog"], small_catalog)
        assert [r.identity for r in acc.results()] == ["wombat", "bat", "dog"]


class TestScoredResult:
    """Result value object."""

    def test_identity_ignores_annotation(self):
        """Identity is the lower-cased label."""
        assert ScoredResult(label="WomBAT", score=3).identity == "wombat"

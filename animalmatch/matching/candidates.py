"""
Candidate Matching.

Responsibilities:
- Select every catalog candidate containing a fragment as a contiguous substring.

Non-Responsibilities:
- No scoring.
- No annotation.
- No ordering guarantees beyond catalog order.

Invariant:
Comparison is case-insensitive; a candidate is never excluded because of letter case.
"""

from typing import List, Sequence


def find_candidates(fragment: str, candidates: Sequence[str]) -> List[str]:
    needle = fragment.lower()
    return [c for c in candidates if needle in c.lower()]

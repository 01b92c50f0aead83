"""
Fragment Generation.

Responsibilities:
- Derive search fragments (prefixes) from normalized query names.
- Emit them longest first, interleaving names per length tier.

Non-Responsibilities:
- No catalog access.
- No scoring.
- No validation (callers reject empty names first).

Invariant:
Fragment order is part of the output contract. Annotation and the
first-match bonus both depend on it, so the sequence must be identical
for identical inputs.
"""

from typing import Iterator, Sequence

INTERLEAVED = "interleaved"
SEQUENTIAL = "sequential"
FRAGMENT_ORDERS = (INTERLEAVED, SEQUENTIAL)


def build_fragments_single(name: str) -> Iterator[str]:
    """Yield prefixes of ``name`` of length L, L-1, ..., 1."""
    for i in range(len(name), 0, -1):
        yield name[:i]


def build_fragments_interleaved(names: Sequence[str]) -> Iterator[str]:
    """
    Yield the length-i prefix of every name long enough, for i from the
    longest name length down to 1. Within a tier, names keep input order.
    """
    longest = max((len(n) for n in names), default=0)
    for i in range(longest, 0, -1):
        for name in names:
            if len(name) >= i:
                yield name[:i]


def build_fragments_sequential(names: Sequence[str]) -> Iterator[str]:
    """Yield all prefixes of each name in turn, one name after another."""
    for name in names:
        yield from build_fragments_single(name)


def build_fragments(names: Sequence[str], order: str = INTERLEAVED) -> Iterator[str]:
    if order == INTERLEAVED:
        if len(names) == 1:
            return build_fragments_single(names[0])
        return build_fragments_interleaved(names)
    if order == SEQUENTIAL:
        return build_fragments_sequential(names)
    raise ValueError(f"Unknown fragment order: {order!r} (expected one of {', '.join(FRAGMENT_ORDERS)})")

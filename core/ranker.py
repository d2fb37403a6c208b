#!/usr/bin/env python3
"""
Ranker - Order scored candidates and keep the top N.
"""

from typing import List, Sequence

from core.scorer.models import ScoredCandidate

DEFAULT_MAX_RESULTS = 5


def rank_candidates(
    scored: Sequence[ScoredCandidate],
    max_results: int = DEFAULT_MAX_RESULTS
) -> List[ScoredCandidate]:
    """
    Sort by score descending and truncate to ``max_results``.

    Ties are broken by candidate id so the output does not depend on merge
    or thread completion order.

    ``None`` keeps every candidate; a negative limit is rejected.
    """
    if max_results is not None and max_results < 0:
        raise ValueError(f"max_results must be non-negative, got {max_results}")

    ranked = sorted(scored, key=lambda s: (-s.score, s.candidate_id))
    if max_results is not None:
        ranked = ranked[:max_results]
    return ranked

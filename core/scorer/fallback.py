#!/usr/bin/env python3
"""
Fallback Score - Degraded scoring from retrieval presence only.

Used when a merged candidate's full profile is unavailable. A structured
match is worth 70 points and the similarity score scales to 80 points.
The result is capped at 99 so that 100 stays reserved for a true dual
match, which always returns the configured dual-match score.
"""

import logging

from core.matcher.models import RetrievalMatch
from core.utils import round_half_up

logger = logging.getLogger(__name__)

STRUCTURED_MATCH_POINTS = 70
SIMILARITY_MAX_POINTS = 80
FALLBACK_SCORE_CAP = 99


def calculate_fallback_score(match: RetrievalMatch, dual_match_score: int = 100) -> int:
    if match.is_dual_match:
        logger.debug(f"Dual match detected for {match.candidate_id} - returning {dual_match_score}")
        return dual_match_score

    score = 0.0
    if match.found_by_structured_filter:
        score += STRUCTURED_MATCH_POINTS
    if match.found_by_similarity and match.similarity_score is not None:
        score += match.similarity_score * SIMILARITY_MAX_POINTS

    return max(0, min(FALLBACK_SCORE_CAP, round_half_up(score)))

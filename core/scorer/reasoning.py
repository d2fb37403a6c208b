#!/usr/bin/env python3
"""
Match Reasoning - Deterministic human-readable explanation of a score.
"""

from typing import List, Sequence

from core.scorer.models import MatchedSkill
from core.scorer.experience import describe_experience

MAX_NAMED_MISSING = 3


def overall_assessment(total_score: int) -> str:
    if total_score >= 85:
        return "Excellent match."
    if total_score >= 70:
        return "Good match with some gaps."
    if total_score >= 50:
        return "Moderate match."
    return "Weak match."


def generate_reasoning(
    total_score: int,
    matched_skills: Sequence[MatchedSkill],
    missing_required_skills: Sequence[str],
    candidate_years: float,
    required_years: float,
    dual_match: bool = False
) -> str:
    """
    Build the reasoning text for a score.

    Args:
        total_score: Final composite score (after any dual-match override)
        matched_skills: Requirements matched by the candidate
        missing_required_skills: Required skills with no candidate match
        candidate_years: Candidate's total years of experience
        required_years: Years resolved for the job's experience curve
        dual_match: Whether both retrieval sources found the candidate

    Returns:
        Space-joined sentences
    """
    parts: List[str] = [overall_assessment(total_score)]

    required_matched = sum(1 for s in matched_skills if s.required)
    total_required = required_matched + len(missing_required_skills)
    if total_required > 0:
        parts.append(f"Skills: {required_matched}/{total_required} required skills matched.")

    if missing_required_skills:
        named = ', '.join(missing_required_skills[:MAX_NAMED_MISSING])
        more = '...' if len(missing_required_skills) > MAX_NAMED_MISSING else ''
        parts.append(f"Missing: {named}{more}.")

    parts.append(describe_experience(candidate_years, required_years))

    if dual_match:
        parts.append("Found by both structured and semantic search.")

    return ' '.join(parts)

#!/usr/bin/env python3
"""
Experience Score - Asymmetric curve over (candidate years - required years).

    0 <= diff <= 3   -> 100                        meets or slightly exceeds
    3 <  diff <= 7   -> 90 - 5 * (diff - 3)        mild overqualification
    diff > 7         -> max(50, 70 - 5 * (diff - 7))
   -2 <= diff < 0    -> 80 + 10 * diff             under-experienced, trainable
    diff < -2        -> max(20, 60 + 10 * diff)

Under-qualification falls off more steeply than over-qualification and
both tails floor instead of reaching zero.
"""

from typing import Optional, Sequence

from core.matcher.models import JobRequirement

DEFAULT_REQUIRED_YEARS = 3.0


def resolve_required_years(
    min_experience_years: Optional[float],
    requirements: Optional[Sequence[JobRequirement]] = None
) -> float:
    """
    Years of experience the job asks for.

    The job-level minimum when set; otherwise the mean of the
    per-requirement minimums that are specified; otherwise 3.
    """
    if min_experience_years:
        return float(min_experience_years)

    minimums = [
        r.min_years_experience for r in (requirements or [])
        if r.min_years_experience
    ]
    if minimums:
        average = sum(minimums) / len(minimums)
        if average > 0:
            return average

    return DEFAULT_REQUIRED_YEARS


def calculate_experience_score(candidate_years: float, required_years: float) -> float:
    """Score (20-100) for candidate experience against the required years."""
    diff = (candidate_years or 0.0) - required_years

    if 0 <= diff <= 3:
        return 100.0
    if 3 < diff <= 7:
        return 90.0 - (diff - 3) * 5
    if diff > 7:
        return max(50.0, 70.0 - (diff - 7) * 5)
    if diff >= -2:
        return 80.0 + diff * 10
    return max(20.0, 60.0 + diff * 10)


def describe_experience(candidate_years: float, required_years: float) -> str:
    """One-line experience alignment statement for match reasoning."""
    diff = (candidate_years or 0.0) - required_years
    years = f"{candidate_years:g}"

    if 0 <= diff <= 3:
        return f"Experience: {years} years (meets requirement)."
    if diff > 3:
        return f"Experience: {years} years (overqualified by {diff:.1f} years)."
    return f"Experience: {years} years ({abs(diff):.1f} years below requirement)."

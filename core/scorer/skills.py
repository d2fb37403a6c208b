#!/usr/bin/env python3
"""
Skill Scores - Skill coverage and proficiency alignment.

Both scores are weighted averages over the job requirements, with required
skills counting double:

    score = sum(points * weight) / sum(100 * weight) * 100

Unmatched preferred skills still earn 20% skill credit so portfolio gaps
are not punished too harshly; unmatched required skills earn nothing and
are reported as missing.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging

from core.matcher.models import Skill, JobRequirement, MAX_LEVEL_ORDINAL
from core.matcher.skill_matcher import SkillMatcher
from core.scorer.models import MatchedSkill
from core.utils import round_half_up

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50
MAX_POINTS = 100
MISSING_PREFERRED_CREDIT = 20


@dataclass
class SkillScoreResult:
    skill_score: int = NEUTRAL_SCORE
    proficiency_score: int = NEUTRAL_SCORE
    matched_skills: List[MatchedSkill] = field(default_factory=list)
    missing_required_skills: List[str] = field(default_factory=list)


def calculate_proficiency_match(skill: Skill, min_years: Optional[float] = None) -> float:
    """
    Proficiency points (0-100) for a matched skill.

    Half comes from the level (1-4 scaled to 0-100), half from years of
    experience against the requirement's minimum, capped at 1.0. When the
    requirement has no minimum or the candidate has no years on record,
    the level score stands in for the years component.
    """
    level_score = skill.level.ordinal / MAX_LEVEL_ORDINAL * 100

    if min_years and skill.years_of_experience is not None:
        years_ratio = min(1.0, max(0.0, skill.years_of_experience) / min_years)
        years_score = years_ratio * 100
    else:
        years_score = level_score

    return level_score * 0.5 + years_score * 0.5


def calculate_skill_scores(
    candidate_skills: Sequence[Skill],
    requirements: Sequence[JobRequirement],
    matcher: SkillMatcher
) -> SkillScoreResult:
    """
    Calculate skill coverage and proficiency scores.

    Args:
        candidate_skills: Skills extracted from the candidate's CV
        requirements: Job requirements (required and preferred)
        matcher: SkillMatcher holding the shared synonym table

    Returns:
        SkillScoreResult with both scores, matched skills and missing required skills
    """
    if not requirements:
        return SkillScoreResult()

    total_skill_points = 0.0
    total_proficiency_points = 0.0
    max_points = 0.0
    matched_skills: List[MatchedSkill] = []
    missing_required: List[str] = []

    for req in requirements:
        weight = req.weight
        max_points += weight * MAX_POINTS

        match = matcher.find_match(req.skill, candidate_skills or [])

        if match:
            total_skill_points += weight * match.credit
            total_proficiency_points += weight * calculate_proficiency_match(
                match.skill, req.min_years_experience
            )
            years_satisfied = (
                not req.min_years_experience
                or (match.skill.years_of_experience or 0.0) >= req.min_years_experience
            )
            matched_skills.append(MatchedSkill(
                skill=req.skill,
                candidate_skill=match.skill.name,
                candidate_level=match.skill.level.value,
                required=req.required,
                years_satisfied=years_satisfied,
                match_method=match.method.value
            ))
        elif req.required:
            missing_required.append(req.skill)
        else:
            total_skill_points += weight * MISSING_PREFERRED_CREDIT

    return SkillScoreResult(
        skill_score=round_half_up(total_skill_points / max_points * 100),
        proficiency_score=round_half_up(total_proficiency_points / max_points * 100),
        matched_skills=matched_skills,
        missing_required_skills=missing_required
    )

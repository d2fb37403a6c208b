#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field

from core.matcher.models import RetrievalMatch


@dataclass(frozen=True)
class MatchedSkill:
    """A job requirement satisfied by one of the candidate's skills."""
    skill: str
    candidate_skill: str
    candidate_level: str
    required: bool
    years_satisfied: bool
    match_method: str = "exact"


@dataclass
class ScoreBreakdown:
    """Explainable composite score for one candidate against one job.

    Pure function output: regenerated on every scoring call.
    """
    total_score: int = 0
    skill_score: int = 0
    proficiency_score: int = 0
    experience_score: int = 0
    location_score: int = 0
    normalized_similarity_score: int = 50
    structured_match_bonus: int = 0

    matched_skills: List[MatchedSkill] = field(default_factory=list)
    missing_required_skills: List[str] = field(default_factory=list)
    reasoning: str = ""

    # Weighted formula result before the dual-match override is applied
    weighted_score: int = 0
    dual_match: bool = False

    def to_details(self) -> Dict[str, Any]:
        """Subset exposed in matching results."""
        return {
            'skill_score': self.skill_score,
            'proficiency_score': self.proficiency_score,
            'experience_score': self.experience_score,
            'location_score': self.location_score,
            'similarity_score': self.normalized_similarity_score,
            'structured_match_bonus': self.structured_match_bonus,
            'weighted_score': self.weighted_score,
            'matched_skills_count': len(self.matched_skills),
            'matched_skills': [s.skill for s in self.matched_skills],
            'missing_required_skills': list(self.missing_required_skills),
            'reasoning': self.reasoning,
        }


@dataclass
class ScoredCandidate:
    """Score for a merged candidate, full breakdown when a profile was available."""
    candidate_id: str
    match: RetrievalMatch
    score: int
    breakdown: Optional[ScoreBreakdown] = None
    used_fallback: bool = False


@dataclass
class MatchingResult:
    """Ranked output row handed to the API layer for serialization."""
    candidate_id: str
    match_score: int
    match_sources: List[str]
    match_details: Dict[str, Any]
    skills: List[str] = field(default_factory=list)
    experience_years: float = 0.0
    summary: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'candidateId': self.candidate_id,
            'name': self.name,
            'email': self.email,
            'matchScore': self.match_score,
            'matchSources': list(self.match_sources),
            'matchDetails': dict(self.match_details),
            'skills': list(self.skills),
            'experienceYears': self.experience_years,
            'summary': self.summary,
        }


@dataclass
class MatchingRunResult:
    """Top-N candidates for a job plus per-source retrieval counts."""
    candidates: List[MatchingResult] = field(default_factory=list)
    sql_match_count: int = 0
    vector_match_count: int = 0
    dual_match_count: int = 0

    @property
    def search_metadata(self) -> Dict[str, int]:
        return {
            'sql_match_count': self.sql_match_count,
            'vector_match_count': self.vector_match_count,
            'dual_match_count': self.dual_match_count,
        }

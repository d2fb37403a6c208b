#!/usr/bin/env python3
"""
Matcher Models - Data structures for retrieval and matching.

Candidate and job inputs arrive as plain dicts from the retrieval layer
(structured filter, similarity search, persistence). The ``from_dict``
constructors are lenient: a malformed record degrades to empty/neutral
values instead of raising, so one bad record never aborts a batch.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def ordinal(self) -> int:
        return _LEVEL_ORDINALS[self]

    @classmethod
    def parse(cls, raw: Any) -> 'SkillLevel':
        """Parse a level string; unknown values fall back to intermediate."""
        if isinstance(raw, SkillLevel):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            logger.warning(f"Unknown skill level {raw!r}, defaulting to intermediate")
            return cls.INTERMEDIATE


_LEVEL_ORDINALS = {
    SkillLevel.BEGINNER: 1,
    SkillLevel.INTERMEDIATE: 2,
    SkillLevel.ADVANCED: 3,
    SkillLevel.EXPERT: 4,
}

MAX_LEVEL_ORDINAL = 4


def _optional_float(raw: Any) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Could not parse numeric value {raw!r}, ignoring")
        return None


def _as_list(raw: Any) -> List[Any]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return list(raw)
    logger.warning(f"Expected a list, got {type(raw).__name__}; treating as empty")
    return []


@dataclass(frozen=True)
class Skill:
    """A candidate skill as extracted from a CV."""
    name: str
    level: SkillLevel = SkillLevel.INTERMEDIATE
    years_of_experience: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['Skill']:
        if isinstance(data, str):
            return cls(name=data) if data.strip() else None
        if not isinstance(data, dict):
            return None
        name = data.get('name')
        if not name or not str(name).strip():
            return None
        return cls(
            name=str(name),
            level=SkillLevel.parse(data.get('level')),
            years_of_experience=_optional_float(
                data.get('yearsOfExperience', data.get('years_of_experience'))
            )
        )


@dataclass(frozen=True)
class JobRequirement:
    """A single skill requirement of a job. Required skills count double."""
    skill: str
    required: bool = False
    min_years_experience: Optional[float] = None

    @property
    def weight(self) -> int:
        return 2 if self.required else 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['JobRequirement']:
        if not isinstance(data, dict):
            return None
        skill = data.get('skill')
        if not skill or not str(skill).strip():
            return None
        return cls(
            skill=str(skill),
            required=bool(data.get('required', False)),
            min_years_experience=_optional_float(
                data.get('minYearsExperience', data.get('min_years_experience'))
            )
        )


@dataclass(frozen=True)
class CandidateProfile:
    """Read-only projection of a persisted candidate, built fresh per scoring call."""
    skills: List[Skill] = field(default_factory=list)
    total_experience_years: float = 0.0
    location: Optional[str] = None
    summary: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CandidateProfile':
        data = data or {}
        skills = [Skill.from_dict(s) for s in _as_list(data.get('skills'))]
        years = _optional_float(
            data.get('totalExperienceYears', data.get('total_experience_years'))
        )
        return cls(
            skills=[s for s in skills if s is not None],
            total_experience_years=years or 0.0,
            location=data.get('location') or None,
            summary=data.get('summary') or None,
            name=data.get('name') or None,
            email=data.get('email') or None
        )


@dataclass(frozen=True)
class JobProfile:
    """Job requirements used as scoring input."""
    requirements: List[JobRequirement] = field(default_factory=list)
    location: Optional[str] = None
    min_experience_years: Optional[float] = None
    summary: Optional[str] = None
    title: Optional[str] = None

    @property
    def skill_names(self) -> List[str]:
        return [r.skill for r in self.requirements]

    def structured_min_experience(self) -> Optional[float]:
        """Minimum experience for the structured filter.

        The job-level minimum when set, otherwise the smallest positive
        per-requirement minimum, otherwise None (no experience filter).
        """
        if self.min_experience_years:
            return self.min_experience_years
        minimums = [
            r.min_years_experience for r in self.requirements
            if r.min_years_experience and r.min_years_experience > 0
        ]
        return min(minimums) if minimums else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobProfile':
        data = data or {}
        requirements = [JobRequirement.from_dict(r) for r in _as_list(data.get('requirements'))]
        return cls(
            requirements=[r for r in requirements if r is not None],
            location=data.get('location') or None,
            min_experience_years=_optional_float(
                data.get('minExperienceYears', data.get('min_experience_years'))
            ),
            summary=data.get('summary') or None,
            title=data.get('title') or None
        )


@dataclass(frozen=True)
class CandidateRecord:
    """Flattened candidate projection returned by both retrieval sources."""
    candidate_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    experience_years: float = 0.0
    location: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CandidateRecord':
        return cls(
            candidate_id=str(data['candidateId'] if 'candidateId' in data else data['candidate_id']),
            name=data.get('name'),
            email=data.get('email'),
            skills=[str(s) for s in _as_list(data.get('skills')) if s],
            experience_years=_optional_float(
                data.get('experienceYears', data.get('experience_years'))
            ) or 0.0,
            location=data.get('location'),
            summary=data.get('summary')
        )


@dataclass(frozen=True)
class StructuredFilterResult(CandidateRecord):
    """Candidate found by the structured (SQL) filter. Carries no ranking score."""


@dataclass(frozen=True)
class SimilarityResult(CandidateRecord):
    """Candidate found by the similarity retriever, with its score in [0, 1]."""
    similarity_score: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimilarityResult':
        base = CandidateRecord.from_dict(data)
        score = _optional_float(
            data.get('similarityScore', data.get('similarity_score', data.get('vectorScore')))
        )
        return cls(
            candidate_id=base.candidate_id,
            name=base.name,
            email=base.email,
            skills=base.skills,
            experience_years=base.experience_years,
            location=base.location,
            summary=base.summary,
            similarity_score=max(0.0, min(1.0, score or 0.0))
        )


@dataclass
class RetrievalMatch:
    """Per-candidate merge record; one per candidate per matching run."""
    candidate_id: str
    found_by_structured_filter: bool = False
    found_by_similarity: bool = False
    similarity_score: Optional[float] = None
    record: Optional[CandidateRecord] = None

    @property
    def is_dual_match(self) -> bool:
        return self.found_by_structured_filter and self.found_by_similarity

    @property
    def match_sources(self) -> List[str]:
        sources = []
        if self.found_by_structured_filter:
            sources.append('sql')
        if self.found_by_similarity:
            sources.append('vector')
        return sources

#!/usr/bin/env python3
"""
Scoring Module - Weighted, explainable candidate scoring.

Public API:
- ScoringService: Scoring orchestrator (single candidate and batch)
- ScoreBreakdown: Factor scores, composite and reasoning
- ScoredCandidate / MatchingResult / MatchingRunResult: Result dataclasses

Single-responsibility modules:

- models.py: Data structures
- skills.py: Skill coverage and proficiency scores
- experience.py: Experience-years curve
- location.py: Location string proximity
- reasoning.py: Human-readable reasoning
- fallback.py: Degraded scoring when no profile is available
- service.py: ScoringService orchestrator
"""

from core.scorer.models import (
    MatchedSkill, ScoreBreakdown, ScoredCandidate, MatchingResult, MatchingRunResult
)
from core.scorer.service import ScoringService

__all__ = [
    'ScoringService', 'MatchedSkill', 'ScoreBreakdown',
    'ScoredCandidate', 'MatchingResult', 'MatchingRunResult',
]

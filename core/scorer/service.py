#!/usr/bin/env python3
"""
Scoring Service - Weighted, explainable candidate scoring.

Combines six factor scores (skill coverage, proficiency, experience,
location, normalized similarity, structured-match bonus) into a 0-100
composite:

    total = round(sum(factor_score * weight) / 100), clamped to [0, 100]

Experience and similarity enter the sum unrounded; the total is rounded
once. The breakdown stores every factor rounded for display.

A candidate found by both retrieval sources bypasses the formula and gets
the configured dual-match score. The weighted value is still computed and
kept on the breakdown as ``weighted_score``.

Scoring is computation-only: the service holds nothing but read-only
configuration, so batches are fanned out over a bounded thread pool.
Factor scoring is pure Python and holds the GIL, so the pool bounds
concurrency but gives no CPU speedup over inline scoring.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple
import logging

from core.config_loader import MatchingWeights, EngineConfig
from core.matcher.models import CandidateProfile, JobProfile, RetrievalMatch
from core.matcher.skill_matcher import SkillMatcher
from core.matcher.synonyms import SynonymTable, DEFAULT_SYNONYM_TABLE
from core.scorer.models import ScoreBreakdown, ScoredCandidate
from core.scorer.skills import calculate_skill_scores
from core.scorer.experience import resolve_required_years, calculate_experience_score
from core.scorer.location import calculate_location_score
from core.scorer.reasoning import generate_reasoning
from core.scorer.fallback import calculate_fallback_score
from core.utils import round_half_up, clamp_score

logger = logging.getLogger(__name__)

NEUTRAL_SIMILARITY_SCORE = 50

ScoringItem = Tuple[RetrievalMatch, Optional[CandidateProfile]]


class ScoringService:
    """
    Scores merged candidates against a job.

    Uses the full CandidateProfile when one is available and falls back to
    retrieval-presence scoring otherwise.
    """

    def __init__(
        self,
        weights: Optional[MatchingWeights] = None,
        config: Optional[EngineConfig] = None,
        synonym_table: SynonymTable = DEFAULT_SYNONYM_TABLE
    ):
        self.weights = weights or MatchingWeights()
        self.config = config or EngineConfig()
        self.skill_matcher = SkillMatcher(synonym_table)

    def score_candidate(
        self,
        profile: CandidateProfile,
        job: JobProfile,
        match: Optional[RetrievalMatch] = None
    ) -> ScoreBreakdown:
        """Calculate the full score breakdown for one candidate.

        Args:
            profile: Full candidate profile from the persistence layer
            job: Job requirements
            match: Retrieval record (sources and similarity); None means
                the candidate was found by neither source

        Returns:
            ScoreBreakdown with factor scores, composite and reasoning
        """
        found_by_structured = bool(match and match.found_by_structured_filter)
        similarity = match.similarity_score if match else None
        dual_match = bool(match and match.is_dual_match)

        skill_result = calculate_skill_scores(profile.skills, job.requirements, self.skill_matcher)

        required_years = resolve_required_years(job.min_experience_years, job.requirements)
        experience_raw = calculate_experience_score(profile.total_experience_years, required_years)

        location_score = calculate_location_score(profile.location, job.location)

        if similarity is not None:
            similarity_raw = max(0.0, min(100.0, similarity * 100))
        else:
            similarity_raw = float(NEUTRAL_SIMILARITY_SCORE)

        structured_bonus = 100 if found_by_structured else 0

        w = self.weights
        weighted_score = clamp_score((
            skill_result.skill_score * w.skill_match +
            skill_result.proficiency_score * w.skill_proficiency +
            experience_raw * w.experience_match +
            location_score * w.location_match +
            similarity_raw * w.vector_similarity +
            structured_bonus * w.structured_match_bonus
        ) / 100)

        total_score = self.config.dual_match_score if dual_match else weighted_score

        reasoning = generate_reasoning(
            total_score=total_score,
            matched_skills=skill_result.matched_skills,
            missing_required_skills=skill_result.missing_required_skills,
            candidate_years=profile.total_experience_years,
            required_years=required_years,
            dual_match=dual_match
        )

        return ScoreBreakdown(
            total_score=total_score,
            skill_score=skill_result.skill_score,
            proficiency_score=skill_result.proficiency_score,
            experience_score=round_half_up(experience_raw),
            location_score=location_score,
            normalized_similarity_score=round_half_up(similarity_raw),
            structured_match_bonus=structured_bonus,
            matched_skills=skill_result.matched_skills,
            missing_required_skills=skill_result.missing_required_skills,
            reasoning=reasoning,
            weighted_score=weighted_score,
            dual_match=dual_match
        )

    def score_match(
        self,
        match: RetrievalMatch,
        profile: Optional[CandidateProfile],
        job: JobProfile
    ) -> ScoredCandidate:
        """Score one merged candidate, degrading to the fallback scorer on missing data or errors."""
        if profile is None:
            logger.warning(f"No profile for candidate {match.candidate_id}; using fallback scoring")
            return self._fallback(match)

        try:
            breakdown = self.score_candidate(profile, job, match)
        except Exception as e:
            logger.error(f"Scoring failed for candidate {match.candidate_id}: {e}")
            return self._fallback(match)

        logger.debug(
            f"Candidate {match.candidate_id}: total={breakdown.total_score}, "
            f"skill={breakdown.skill_score}, exp={breakdown.experience_score}, "
            f"sources={match.match_sources}"
        )
        return ScoredCandidate(
            candidate_id=match.candidate_id,
            match=match,
            score=breakdown.total_score,
            breakdown=breakdown
        )

    def score_batch(self, items: Sequence[ScoringItem], job: JobProfile) -> List[ScoredCandidate]:
        """
        Score a batch of merged candidates against one job.

        Candidates are independent, so large batches are fanned out over a
        thread pool bounded by ``max_workers``; batches below
        ``parallel_threshold`` are scored inline. Output order matches
        input order. Threads share the GIL, so this is not multi-core
        parallelism for the pure-Python scoring path.

        Args:
            items: (RetrievalMatch, CandidateProfile or None) pairs
            job: Job requirements

        Returns:
            List of ScoredCandidate in input order
        """
        items = list(items)
        if not items:
            return []

        if len(items) < self.config.parallel_threshold or self.config.max_workers == 1:
            results = [self.score_match(match, profile, job) for match, profile in items]
        else:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                results = list(executor.map(
                    lambda item: self.score_match(item[0], item[1], job),
                    items
                ))

        fallback_count = sum(1 for r in results if r.used_fallback)
        logger.info(f"Scored {len(results)} candidates ({fallback_count} via fallback)")
        return results

    def _fallback(self, match: RetrievalMatch) -> ScoredCandidate:
        return ScoredCandidate(
            candidate_id=match.candidate_id,
            match=match,
            score=calculate_fallback_score(match, self.config.dual_match_score),
            breakdown=None,
            used_fallback=True
        )

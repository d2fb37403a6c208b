#!/usr/bin/env python3
"""
Job Matching Service - Dual retrieval, merge, score and rank.

Pipeline for one job:
1. Structured filter: candidates with enough skill overlap / experience
2. Similarity search: candidates nearest to the job's summary embedding
3. Merge both into one RetrievalMatch per candidate
4. Fetch full profiles and score every merged candidate
5. Rank and keep the top N

Each run builds its own merge map; the service itself only holds
read-only configuration and its collaborators.
"""
from typing import Dict, List, Optional, Sequence
import logging

from core.config_loader import MatchingConfig
from core.interfaces import StructuredFilter, SimilarityRetriever, CandidateProfileSource
from core.matcher.models import JobProfile, CandidateProfile, RetrievalMatch
from core.matcher.merger import merge_retrieval_results, count_sources
from core.matcher.synonyms import SynonymTable, build_synonym_table
from core.scorer.models import ScoredCandidate, MatchingResult, MatchingRunResult
from core.scorer.service import ScoringService
from core.ranker import rank_candidates

logger = logging.getLogger(__name__)


def build_matching_result(
    scored: ScoredCandidate,
    profile: Optional[CandidateProfile]
) -> MatchingResult:
    """Shape a scored candidate into an output row.

    Flattened retrieval fields win; the full profile fills the gaps.
    """
    match = scored.match
    record = match.record

    details = {
        'sql_match': match.found_by_structured_filter,
        'vector_match': match.found_by_similarity,
        'vector_score': match.similarity_score,
        'fallback': scored.used_fallback,
    }
    if scored.breakdown:
        details.update(scored.breakdown.to_details())

    skills = list(record.skills) if record and record.skills else []
    if not skills and profile:
        skills = [s.name for s in profile.skills]

    experience_years = record.experience_years if record else 0.0
    if not experience_years and profile:
        experience_years = profile.total_experience_years

    return MatchingResult(
        candidate_id=scored.candidate_id,
        match_score=scored.score,
        match_sources=match.match_sources,
        match_details=details,
        skills=skills,
        experience_years=experience_years,
        summary=(record.summary if record else None) or (profile.summary if profile else None),
        name=(record.name if record else None) or (profile.name if profile else None),
        email=(record.email if record else None) or (profile.email if profile else None)
    )


class JobMatchingService:
    """
    Finds and ranks the best candidates for a job.

    Retrieval and persistence collaborators are injected; all scoring is
    delegated to ScoringService.
    """

    def __init__(
        self,
        structured_filter: StructuredFilter,
        similarity_retriever: SimilarityRetriever,
        profile_source: CandidateProfileSource,
        config: Optional[MatchingConfig] = None,
        synonym_table: Optional[SynonymTable] = None,
        scoring_service: Optional[ScoringService] = None
    ):
        self.structured_filter = structured_filter
        self.similarity_retriever = similarity_retriever
        self.profile_source = profile_source
        self.config = config or MatchingConfig()
        if scoring_service is None:
            if synonym_table is None:
                synonym_table = build_synonym_table(self.config.engine.skill_synonyms)
            scoring_service = ScoringService(
                weights=self.config.weights,
                config=self.config.engine,
                synonym_table=synonym_table
            )
        self.scoring_service = scoring_service

    def retrieve(
        self,
        job: JobProfile,
        query_embedding: Optional[Sequence[float]] = None
    ) -> Dict[str, RetrievalMatch]:
        """Run both retrieval sources and merge their results."""
        engine = self.config.engine
        retrieval = self.config.retrieval

        min_experience = job.structured_min_experience()
        structured = self.structured_filter.query_candidates(
            skills=job.skill_names,
            min_experience_years=min_experience,
            min_skill_match_percentage=engine.min_skill_match_percentage,
            limit=retrieval.sql_limit
        )
        logger.info(f"Structured filter found {len(structured)} candidates")

        similar = []
        if query_embedding is not None:
            similar = self.similarity_retriever.search_candidates(
                query_embedding, limit=retrieval.vector_limit
            )
            logger.info(f"Similarity search found {len(similar)} candidates")
        else:
            logger.warning("No query embedding provided; skipping similarity search")

        return merge_retrieval_results(structured, similar)

    def find_matching_candidates(
        self,
        job: JobProfile,
        query_embedding: Optional[Sequence[float]] = None,
        max_results: Optional[int] = None
    ) -> MatchingRunResult:
        """
        Find the top candidates for a job.

        Args:
            job: Structured job requirements
            query_embedding: Precomputed embedding of the job summary
            max_results: Override for the configured result limit

        Returns:
            MatchingRunResult with ranked candidates and per-source counts
        """
        merged = self.retrieve(job, query_embedding)
        counts = count_sources(merged)

        if not merged:
            logger.info("No candidates found by either retrieval source")
            return MatchingRunResult(**counts)

        profiles = self.profile_source.get_profiles_by_ids(list(merged.keys()))
        missing = len(merged) - sum(1 for cid in merged if cid in profiles)
        if missing:
            logger.warning(f"{missing} merged candidates have no stored profile")

        items = [(match, profiles.get(candidate_id)) for candidate_id, match in merged.items()]
        scored = self.scoring_service.score_batch(items, job)

        limit = max_results if max_results is not None else self.config.engine.max_results
        top = rank_candidates(scored, limit)

        candidates = [build_matching_result(s, profiles.get(s.candidate_id)) for s in top]

        logger.info(
            f"Returning top {len(candidates)} candidates "
            f"({counts['dual_match_count']} dual matches)"
        )
        return MatchingRunResult(candidates=candidates, **counts)

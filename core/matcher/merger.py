#!/usr/bin/env python3
"""
Result Merger - Union of structured-filter and similarity results.

Each run builds and returns a fresh mapping; nothing is shared between
matching requests.
"""
from typing import Dict, Iterable
import logging

from core.matcher.models import RetrievalMatch, StructuredFilterResult, SimilarityResult

logger = logging.getLogger(__name__)


def merge_retrieval_results(
    structured_results: Iterable[StructuredFilterResult],
    similarity_results: Iterable[SimilarityResult]
) -> Dict[str, RetrievalMatch]:
    """
    Merge both retrieval sources into one record per candidate.

    Structured-filter hits are inserted first. A similarity hit for a
    candidate already present marks it as found by both sources and
    attaches the similarity score; otherwise a similarity-only record is
    inserted.

    Consumers must not rely on the iteration order of the returned mapping.

    Args:
        structured_results: Candidates returned by the structured filter
        similarity_results: Candidates returned by the similarity retriever

    Returns:
        Dict mapping candidate_id -> RetrievalMatch
    """
    merged: Dict[str, RetrievalMatch] = {}

    for result in structured_results:
        if result.candidate_id in merged:
            continue
        merged[result.candidate_id] = RetrievalMatch(
            candidate_id=result.candidate_id,
            found_by_structured_filter=True,
            record=result
        )

    for result in similarity_results:
        existing = merged.get(result.candidate_id)
        if existing is not None:
            existing.found_by_similarity = True
            if existing.similarity_score is None or result.similarity_score > existing.similarity_score:
                existing.similarity_score = result.similarity_score
        else:
            merged[result.candidate_id] = RetrievalMatch(
                candidate_id=result.candidate_id,
                found_by_similarity=True,
                similarity_score=result.similarity_score,
                record=result
            )

    return merged


def count_sources(merged: Dict[str, RetrievalMatch]) -> Dict[str, int]:
    """Count candidates per retrieval source, including dual matches."""
    return {
        'sql_match_count': sum(1 for m in merged.values() if m.found_by_structured_filter),
        'vector_match_count': sum(1 for m in merged.values() if m.found_by_similarity),
        'dual_match_count': sum(1 for m in merged.values() if m.is_dual_match),
    }

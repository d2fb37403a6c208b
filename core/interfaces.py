"""
Retrieval Interfaces - Abstract bases for the stores feeding the engine.

The engine never touches storage itself; it is handed already-materialized
results through these interfaces (SQLAlchemy/pgvector repositories in
production, in-memory fakes in tests).
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from core.matcher.models import CandidateProfile, StructuredFilterResult, SimilarityResult


class StructuredFilter(ABC):
    """Coarse attribute filter over the relational store. Results are unranked."""

    @abstractmethod
    def query_candidates(
        self,
        skills: Sequence[str],
        min_experience_years: Optional[float] = None,
        min_skill_match_percentage: float = 60.0,
        limit: int = 20
    ) -> List[StructuredFilterResult]:
        pass


class SimilarityRetriever(ABC):
    """Nearest-neighbour search over precomputed candidate embeddings."""

    @abstractmethod
    def search_candidates(
        self,
        query_embedding: Sequence[float],
        limit: int = 20
    ) -> List[SimilarityResult]:
        """Return candidates ordered by similarity score in [0, 1], best first."""
        pass


class CandidateProfileSource(ABC):
    """Full candidate profiles from the persistence layer."""

    @abstractmethod
    def get_profiles_by_ids(self, candidate_ids: Sequence[str]) -> Dict[str, CandidateProfile]:
        """Profiles keyed by candidate id; unknown ids are simply absent."""
        pass

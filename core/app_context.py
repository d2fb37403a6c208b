from dataclasses import dataclass

from core.config_loader import AppConfig
from core.matcher.synonyms import SynonymTable, build_synonym_table
from core.matching_service import JobMatchingService
from core.scorer.service import ScoringService
from database.uow import CandidateRepositories


@dataclass
class AppContext:
    """Application context container that holds process-wide, read-only wiring.

    The synonym table and scoring service are built once at startup and
    shared by every matching run. DB access is bound per unit of work via
    matching_service(repos) inside database.uow.candidate_uow().
    """
    config: AppConfig
    synonym_table: SynonymTable
    scoring_service: ScoringService

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded (and validated) application configuration

        Returns:
            Wired AppContext instance (no DB session attached)
        """
        matching = config.matching
        synonym_table = build_synonym_table(matching.engine.skill_synonyms)

        scoring_service = ScoringService(
            weights=matching.weights,
            config=matching.engine,
            synonym_table=synonym_table
        )

        return cls(
            config=config,
            synonym_table=synonym_table,
            scoring_service=scoring_service
        )

    def matching_service(self, repos: CandidateRepositories) -> JobMatchingService:
        """JobMatchingService over one unit of work's repositories."""
        return JobMatchingService(
            structured_filter=repos.candidates,
            similarity_retriever=repos.embeddings,
            profile_source=repos.candidates,
            config=self.config.matching,
            scoring_service=self.scoring_service
        )

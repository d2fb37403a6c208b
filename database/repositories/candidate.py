import logging
import math
import uuid
from typing import List, Optional, Dict, Any, Sequence

from sqlalchemy import select, text

from database.models import Candidate
from database.repositories.base import BaseRepository
from core.interfaces import StructuredFilter, CandidateProfileSource
from core.matcher.models import CandidateProfile, StructuredFilterResult

logger = logging.getLogger(__name__)

_SKILL_PRESENT_SQL = (
    "(CASE WHEN EXISTS ("
    "SELECT 1 FROM jsonb_array_elements(candidate.skills) AS s "
    "WHERE LOWER(s->>'name') LIKE LOWER(:{param})"
    ") THEN 1 ELSE 0 END)"
)


def min_skill_match_count(skill_count: int, min_percentage: float) -> int:
    """Number of job skills a candidate must have to pass the structured filter."""
    return math.ceil(skill_count * min_percentage / 100)


def _escape_like(value: str) -> str:
    return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


class CandidateRepository(BaseRepository, StructuredFilter, CandidateProfileSource):
    """Relational access to candidates: structured filter and full profiles."""

    def query_candidates(
        self,
        skills: Sequence[str],
        min_experience_years: Optional[float] = None,
        min_skill_match_percentage: float = 60.0,
        limit: int = 20
    ) -> List[StructuredFilterResult]:
        """
        Active candidates with enough skill overlap and experience.

        A job skill counts as present when any candidate skill name contains
        it (case-insensitive). Ordered by experience, most experienced first.
        """
        stmt = select(Candidate).where(Candidate.status == self.ACTIVE_STATUS)

        if min_experience_years is not None:
            stmt = stmt.where(Candidate.total_experience_years >= min_experience_years)

        skills = [s for s in skills if s and s.strip()]
        if skills:
            min_count = min_skill_match_count(len(skills), min_skill_match_percentage)
            logger.info(
                f"Requiring {min_count}/{len(skills)} skills ({min_skill_match_percentage:g}% match)"
            )
            params: Dict[str, Any] = {'min_match_count': min_count}
            conditions = []
            for index, skill in enumerate(skills):
                param = f"skill{index}"
                conditions.append(_SKILL_PRESENT_SQL.format(param=param))
                params[param] = f"%{_escape_like(skill.strip())}%"
            stmt = stmt.where(
                text(f"({' + '.join(conditions)}) >= :min_match_count").bindparams(**params)
            )

        stmt = stmt.order_by(Candidate.total_experience_years.desc()).limit(limit)

        candidates = self.db.execute(stmt).scalars().all()
        results = [StructuredFilterResult.from_dict(c.to_record_dict()) for c in candidates]

        logger.info(f"Found {len(results)} candidates matching structured query")
        return results

    def get_profiles_by_ids(self, candidate_ids: Sequence[str]) -> Dict[str, CandidateProfile]:
        if not candidate_ids:
            return {}

        ids = []
        for candidate_id in candidate_ids:
            try:
                ids.append(uuid.UUID(str(candidate_id)))
            except ValueError:
                logger.warning(f"Ignoring malformed candidate id {candidate_id!r}")
        if not ids:
            return {}

        stmt = select(Candidate).where(Candidate.id.in_(ids))
        rows = self.db.execute(stmt).scalars().all()

        return {str(row.id): CandidateProfile.from_dict(row.to_profile_dict()) for row in rows}

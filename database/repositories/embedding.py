import logging
from typing import List, Sequence

from sqlalchemy import select

from database.models import Candidate
from database.repositories.base import BaseRepository
from core.interfaces import SimilarityRetriever
from core.matcher.models import SimilarityResult
from core.utils import cosine_similarity_from_distance

logger = logging.getLogger(__name__)


class CandidateEmbeddingRepository(BaseRepository, SimilarityRetriever):
    def search_candidates(
        self,
        query_embedding: Sequence[float],
        limit: int = 20
    ) -> List[SimilarityResult]:
        distance = Candidate.summary_embedding.cosine_distance(list(query_embedding)).label('distance')
        stmt = (
            select(Candidate, distance)
            .where(
                Candidate.status == self.ACTIVE_STATUS,
                Candidate.summary_embedding.isnot(None)
            )
            .order_by('distance')
            .limit(limit)
        )

        rows = self.db.execute(stmt).all()

        results = []
        for row in rows:
            record = row[0].to_record_dict()
            record['similarityScore'] = cosine_similarity_from_distance(row._mapping['distance'])
            results.append(SimilarityResult.from_dict(record))

        logger.info(f"Found {len(results)} candidates via similarity search")
        return results

import contextlib
from dataclasses import dataclass

from database.database import SessionLocal
from database.repositories import CandidateRepository, CandidateEmbeddingRepository


@dataclass
class CandidateRepositories:
    """Repositories sharing one Session."""
    candidates: CandidateRepository
    embeddings: CandidateEmbeddingRepository


@contextlib.contextmanager
def candidate_uow():
    """Per-unit-of-work transaction scope.

    Yields CandidateRepositories bound to a fresh Session. Commits on
    success, rolls back on exception, always closes.

    Usage:
        with candidate_uow() as repos:
            service = ctx.matching_service(repos)
            result = service.find_matching_candidates(job)
        # commit happens automatically on successful exit
    """
    session = SessionLocal()
    try:
        yield CandidateRepositories(
            candidates=CandidateRepository(session),
            embeddings=CandidateEmbeddingRepository(session)
        )
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

from database.repositories.base import BaseRepository
from database.repositories.candidate import CandidateRepository
from database.repositories.embedding import CandidateEmbeddingRepository

__all__ = [
    'BaseRepository',
    'CandidateRepository',
    'CandidateEmbeddingRepository',
]

from .base import Base
from .candidate import Candidate, EMBEDDING_DIMENSIONS

__all__ = [
    'Base',
    'Candidate',
    'EMBEDDING_DIMENSIONS',
]

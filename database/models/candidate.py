import uuid
from typing import Any, Dict

from sqlalchemy import Column, Text, TIMESTAMP, Float, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from pgvector.sqlalchemy import Vector

from .base import Base

EMBEDDING_DIMENSIONS = 1024


class Candidate(Base):
    """
    Persisted candidate extracted from a CV.

    ``skills`` is replaced wholesale on re-ingestion; each entry is
    ``{"name": str, "level": str, "yearsOfExperience": float | null}``.
    """
    __tablename__ = 'candidate'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, index=True)
    email = Column(Text, unique=True)
    phone = Column(Text)
    location = Column(Text, index=True)

    skills = Column(JSONB, nullable=False, default=list)
    experience = Column(JSONB, nullable=False, default=list)
    education = Column(JSONB, nullable=False, default=list)
    total_experience_years = Column(Float, nullable=False, default=0.0)

    summary = Column(Text)
    summary_embedding = Column(Vector(EMBEDDING_DIMENSIONS))

    status = Column(Text, nullable=False, default='active')  # active|inactive|archived

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    __table_args__ = (
        Index('idx_candidate_status', 'status'),
        Index('idx_candidate_summary_embedding_hnsw', 'summary_embedding', postgresql_using='hnsw',
              postgresql_with={'m': 16, 'ef_construction': 64},
              postgresql_ops={'summary_embedding': 'vector_cosine_ops'}),
    )

    def to_profile_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'email': self.email,
            'skills': self.skills or [],
            'totalExperienceYears': self.total_experience_years,
            'location': self.location,
            'summary': self.summary,
        }

    def to_record_dict(self) -> Dict[str, Any]:
        """Flattened projection shared by both retrieval sources."""
        return {
            'candidateId': str(self.id),
            'name': self.name,
            'email': self.email,
            'skills': [s.get('name') for s in (self.skills or []) if isinstance(s, dict) and s.get('name')],
            'experienceYears': self.total_experience_years or 0.0,
            'location': self.location,
            'summary': self.summary,
        }

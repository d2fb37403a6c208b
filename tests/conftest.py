"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and shared fixtures.
Builders for engine inputs live in tests/mocks/matcher_mocks.py.
"""

import pytest

from core.config_loader import MatchingWeights, EngineConfig
from core.matcher.models import Skill, SkillLevel, JobRequirement, CandidateProfile, JobProfile
from core.scorer.service import ScoringService


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def scoring_service():
    return ScoringService(weights=MatchingWeights(), config=EngineConfig())


@pytest.fixture
def python_docker_job():
    """Python required (min 5y) and Docker preferred."""
    return JobProfile(
        requirements=[
            JobRequirement(skill="Python", required=True, min_years_experience=5),
            JobRequirement(skill="Docker", required=False),
        ]
    )


@pytest.fixture
def senior_python_candidate():
    """Python expert with 8 years, no Docker."""
    return CandidateProfile(
        skills=[Skill(name="Python", level=SkillLevel.EXPERT, years_of_experience=8)],
        total_experience_years=8
    )

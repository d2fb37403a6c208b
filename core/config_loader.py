import yaml
import os
from typing import List, Optional, Dict
from pydantic import BaseModel, Field, model_validator


class DatabaseConfig(BaseModel):
    url: str


class MatchingWeights(BaseModel):
    """
    Factor weights for the composite match score.

    totalScore = sum(factor_score * weight) / 100, so the six weights must
    sum to exactly 100 for the composite to stay within [0, 100].
    """
    skill_match: int = 35
    skill_proficiency: int = 15
    experience_match: int = 20
    location_match: int = 10
    vector_similarity: int = 15
    structured_match_bonus: int = 5

    @model_validator(mode='after')
    def _check_weights(self) -> 'MatchingWeights':
        values = self.model_dump()
        negative = [name for name, weight in values.items() if weight < 0]
        if negative:
            raise ValueError(f"Matching weights must be non-negative: {', '.join(negative)}")
        total = sum(values.values())
        if total != 100:
            raise ValueError(f"Matching weights must sum to 100, got {total}")
        return self


class RetrievalConfig(BaseModel):
    """Limits for the two retrieval sources feeding the merger."""
    sql_limit: int = Field(default=20, ge=1)
    vector_limit: int = Field(default=20, ge=1)


class EngineConfig(BaseModel):
    """
    Configuration for the scoring engine.

    Read once at process start; the engine treats it as read-only.
    """
    dual_match_score: int = Field(default=100, ge=0, le=100)
    max_results: int = Field(default=5, ge=1)
    min_skill_match_percentage: float = Field(default=60.0, ge=0.0, le=100.0)

    # Batch scoring fan-out
    max_workers: int = Field(default=4, ge=1)
    parallel_threshold: int = Field(default=16, ge=1)  # smaller batches are scored inline

    # Extra alias groups merged into the built-in synonym table, e.g.
    #   golang: [go]
    skill_synonyms: Dict[str, List[str]] = Field(default_factory=dict)


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    weights: MatchingWeights = Field(default_factory=MatchingWeights)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)


class AppConfig(BaseModel):
    database: DatabaseConfig
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    # Allow env var overrides for engine knobs
    env_overrides = {
        'dual_match_score': os.environ.get("MATCHING_DUAL_MATCH_SCORE"),
        'max_results': os.environ.get("MATCHING_MAX_RESULTS"),
    }
    for key, value in env_overrides.items():
        if value:
            if data.get('matching') is None:
                data['matching'] = {}
            if data['matching'].get('engine') is None:
                data['matching']['engine'] = {}
            data['matching']['engine'][key] = int(value)

    return AppConfig(**data)

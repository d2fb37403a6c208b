"""Matcher Module - Retrieval merge and skill matching."""
from core.matcher.models import (
    SkillLevel, Skill, JobRequirement, CandidateProfile, JobProfile,
    CandidateRecord, StructuredFilterResult, SimilarityResult, RetrievalMatch
)
from core.matcher.merger import merge_retrieval_results, count_sources
from core.matcher.synonyms import SynonymTable, build_synonym_table, normalize_skill_name
from core.matcher.skill_matcher import SkillMatcher, SkillMatch, MatchMethod, levenshtein_distance

__all__ = [
    'SkillLevel', 'Skill', 'JobRequirement', 'CandidateProfile', 'JobProfile',
    'CandidateRecord', 'StructuredFilterResult', 'SimilarityResult', 'RetrievalMatch',
    'merge_retrieval_results', 'count_sources',
    'SynonymTable', 'build_synonym_table', 'normalize_skill_name',
    'SkillMatcher', 'SkillMatch', 'MatchMethod', 'levenshtein_distance',
]

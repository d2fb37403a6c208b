#!/usr/bin/env python3
"""
Test JobMatchingService.

Runs the full retrieve -> merge -> score -> rank pipeline against
in-memory retrieval sources.
"""
import unittest
from unittest.mock import MagicMock

from core.config_loader import MatchingConfig, EngineConfig
from core.interfaces import CandidateProfileSource
from core.matcher.models import (
    Skill, SkillLevel, JobRequirement, CandidateProfile, JobProfile, RetrievalMatch
)
from core.matching_service import JobMatchingService, build_matching_result
from core.scorer.models import ScoredCandidate
from core.scorer.service import ScoringService
from tests.mocks.matcher_mocks import (
    MockStructuredFilter,
    MockSimilarityRetriever,
    MockProfileSource,
    structured_hit,
    similarity_hit
)

QUERY_EMBEDDING = [0.1] * 8


class TestJobMatchingService(unittest.TestCase):

    def setUp(self):
        self.job = JobProfile(requirements=[
            JobRequirement(skill="Python", required=True, min_years_experience=5),
            JobRequirement(skill="Docker", required=False),
        ])
        senior = CandidateProfile(
            skills=[Skill(name="Python", level=SkillLevel.EXPERT, years_of_experience=8)],
            total_experience_years=8,
            name="Alice"
        )
        self.structured = MockStructuredFilter([
            structured_hit("a", name="Alice", skills=["Python"], experience_years=8),
            structured_hit("b", name="Bob", skills=["Python", "Docker"], experience_years=6),
        ])
        self.similarity = MockSimilarityRetriever([
            similarity_hit("b", 0.9, name="Bob"),
            similarity_hit("c", 0.7, name="Cara", skills=["Go"]),
        ])
        self.profiles = MockProfileSource({"a": senior, "b": senior})
        self.service = JobMatchingService(self.structured, self.similarity, self.profiles)

    def test_end_to_end_ranking(self):
        result = self.service.find_matching_candidates(self.job, QUERY_EMBEDDING)

        ids = [c.candidate_id for c in result.candidates]
        scores = [c.match_score for c in result.candidates]
        self.assertEqual(ids, ["b", "a", "c"])
        # b: dual match, a: full score, c: no profile -> 0.7 * 80
        self.assertEqual(scores, [100, 78, 56])

        self.assertEqual(result.candidates[0].match_sources, ["sql", "vector"])
        self.assertEqual(result.candidates[1].match_sources, ["sql"])
        self.assertEqual(result.candidates[2].match_sources, ["vector"])
        self.assertTrue(result.candidates[2].match_details['fallback'])

    def test_search_metadata(self):
        result = self.service.find_matching_candidates(self.job, QUERY_EMBEDDING)
        self.assertEqual(result.search_metadata, {
            'sql_match_count': 2,
            'vector_match_count': 2,
            'dual_match_count': 1,
        })

    def test_structured_filter_query(self):
        self.service.find_matching_candidates(self.job, QUERY_EMBEDDING)
        self.assertEqual(self.structured.last_query, {
            'skills': ["Python", "Docker"],
            'min_experience_years': 5,
            'min_skill_match_percentage': 60.0,
            'limit': 20,
        })

    def test_without_embedding_skips_similarity(self):
        result = self.service.find_matching_candidates(self.job)

        self.assertEqual(self.similarity.calls, 0)
        self.assertEqual(result.vector_match_count, 0)
        self.assertEqual([c.candidate_id for c in result.candidates], ["a", "b"])

    def test_max_results_override(self):
        result = self.service.find_matching_candidates(self.job, QUERY_EMBEDDING, max_results=1)
        self.assertEqual([c.candidate_id for c in result.candidates], ["b"])

    def test_configured_max_results(self):
        config = MatchingConfig(engine=EngineConfig(max_results=2))
        service = JobMatchingService(self.structured, self.similarity, self.profiles, config=config)
        result = service.find_matching_candidates(self.job, QUERY_EMBEDDING)
        self.assertEqual(len(result.candidates), 2)

    def test_no_candidates(self):
        profiles = MagicMock(spec=CandidateProfileSource)
        service = JobMatchingService(MockStructuredFilter(), MockSimilarityRetriever(), profiles)

        result = service.find_matching_candidates(self.job, QUERY_EMBEDDING)

        self.assertEqual(result.candidates, [])
        self.assertEqual(result.dual_match_count, 0)
        profiles.get_profiles_by_ids.assert_not_called()

    def test_shared_scoring_service(self):
        scoring = ScoringService()
        service = JobMatchingService(
            self.structured, self.similarity, self.profiles, scoring_service=scoring
        )
        self.assertIs(service.scoring_service, scoring)

    def test_configured_synonyms_reach_scoring(self):
        job = JobProfile(requirements=[JobRequirement(skill="Kotlin", required=True)])
        profile = CandidateProfile(skills=[Skill(name="KT")], total_experience_years=3)
        config = MatchingConfig(engine=EngineConfig(skill_synonyms={"kotlin": ["kt"]}))
        service = JobMatchingService(
            MockStructuredFilter([structured_hit("g")]),
            MockSimilarityRetriever(),
            MockProfileSource({"g": profile}),
            config=config
        )

        result = service.find_matching_candidates(job)

        details = result.candidates[0].match_details
        self.assertEqual(details["matched_skills"], ["Kotlin"])
        self.assertEqual(details['skill_score'], 80)

    def test_runs_are_independent(self):
        first = self.service.find_matching_candidates(self.job, QUERY_EMBEDDING)
        second = self.service.find_matching_candidates(self.job)

        self.assertEqual(first.dual_match_count, 1)
        self.assertEqual(second.dual_match_count, 0)


class TestBuildMatchingResult(unittest.TestCase):

    def test_record_fields_win(self):
        match = RetrievalMatch(
            "a", found_by_structured_filter=True,
            record=structured_hit("a", name="Alice", skills=["Python"], experience_years=8)
        )
        profile = CandidateProfile(
            skills=[Skill(name="Rust")], total_experience_years=2,
            name="Someone Else", email="alice@example.com", summary="Backend engineer"
        )
        result = build_matching_result(ScoredCandidate("a", match, 70, used_fallback=True), profile)

        self.assertEqual(result.name, "Alice")
        self.assertEqual(result.skills, ["Python"])
        self.assertEqual(result.experience_years, 8)
        self.assertEqual(result.email, "alice@example.com")
        self.assertEqual(result.summary, "Backend engineer")

    def test_profile_fills_gaps(self):
        match = RetrievalMatch("a", found_by_similarity=True, similarity_score=0.4)
        profile = CandidateProfile(skills=[Skill(name="Rust")], total_experience_years=2, name="Ann")
        result = build_matching_result(ScoredCandidate("a", match, 32, used_fallback=True), profile)

        self.assertEqual(result.skills, ["Rust"])
        self.assertEqual(result.experience_years, 2)
        self.assertEqual(result.name, "Ann")
        self.assertEqual(result.match_details, {
            'sql_match': False,
            'vector_match': True,
            'vector_score': 0.4,
            'fallback': True,
        })

    def test_to_dict(self):
        match = RetrievalMatch("a", True, True, 0.9, record=structured_hit("a", name="Alice"))
        result = build_matching_result(ScoredCandidate("a", match, 100), None)

        data = result.to_dict()
        self.assertEqual(data['candidateId'], "a")
        self.assertEqual(data['matchScore'], 100)
        self.assertEqual(data['matchSources'], ["sql", "vector"])
        self.assertEqual(data['name'], "Alice")
        self.assertEqual(data['skills'], [])


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3
"""
Test Match Reasoning.
"""
import unittest

from core.scorer.models import MatchedSkill
from core.scorer.reasoning import generate_reasoning, overall_assessment


def _matched(skill, required=True):
    return MatchedSkill(
        skill=skill, candidate_skill=skill, candidate_level="expert",
        required=required, years_satisfied=True
    )


class TestOverallAssessment(unittest.TestCase):

    def test_bands(self):
        self.assertEqual(overall_assessment(85), "Excellent match.")
        self.assertEqual(overall_assessment(84), "Good match with some gaps.")
        self.assertEqual(overall_assessment(70), "Good match with some gaps.")
        self.assertEqual(overall_assessment(69), "Moderate match.")
        self.assertEqual(overall_assessment(50), "Moderate match.")
        self.assertEqual(overall_assessment(49), "Weak match.")


class TestGenerateReasoning(unittest.TestCase):

    def test_full_sentence(self):
        text = generate_reasoning(
            total_score=78,
            matched_skills=[_matched("Python"), _matched("Docker", required=False)],
            missing_required_skills=[],
            candidate_years=8,
            required_years=5
        )
        self.assertEqual(
            text,
            "Good match with some gaps. Skills: 1/1 required skills matched. "
            "Experience: 8 years (meets requirement)."
        )

    def test_missing_skills_are_truncated(self):
        text = generate_reasoning(
            total_score=20,
            matched_skills=[],
            missing_required_skills=["Python", "SQL", "Docker", "Kafka"],
            candidate_years=1,
            required_years=5
        )
        self.assertIn("Skills: 0/4 required skills matched.", text)
        self.assertIn("Missing: Python, SQL, Docker....", text)
        self.assertNotIn("Kafka", text)

    def test_no_required_skills_omits_skill_line(self):
        text = generate_reasoning(60, [_matched("Docker", required=False)], [], 3, 3)
        self.assertNotIn("Skills:", text)
        self.assertTrue(text.startswith("Moderate match."))

    def test_dual_match_note(self):
        text = generate_reasoning(100, [_matched("Python")], [], 8, 5, dual_match=True)
        self.assertTrue(text.startswith("Excellent match."))
        self.assertTrue(text.endswith("Found by both structured and semantic search."))

    def test_deterministic(self):
        args = (72, [_matched("Python")], ["SQL"], 4, 5)
        self.assertEqual(generate_reasoning(*args), generate_reasoning(*args))


if __name__ == '__main__':
    unittest.main()

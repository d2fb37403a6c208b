#!/usr/bin/env python3
"""
Test Fallback Score.
"""
import unittest

from core.matcher.models import RetrievalMatch
from core.scorer.fallback import calculate_fallback_score


class TestCalculateFallbackScore(unittest.TestCase):

    def test_dual_match_returns_dual_score(self):
        match = RetrievalMatch("a", True, True, 0.3)
        self.assertEqual(calculate_fallback_score(match), 100)
        self.assertEqual(calculate_fallback_score(match, dual_match_score=90), 90)

    def test_structured_only(self):
        self.assertEqual(calculate_fallback_score(RetrievalMatch("a", found_by_structured_filter=True)), 70)

    def test_similarity_only(self):
        match = RetrievalMatch("a", found_by_similarity=True, similarity_score=0.5)
        self.assertEqual(calculate_fallback_score(match), 40)

        match = RetrievalMatch("a", found_by_similarity=True, similarity_score=1.0)
        self.assertEqual(calculate_fallback_score(match), 80)

    def test_no_sources(self):
        self.assertEqual(calculate_fallback_score(RetrievalMatch("a")), 0)

    def test_single_source_never_reaches_dual_score(self):
        for score in (0.0, 0.25, 0.5, 0.75, 1.0):
            match = RetrievalMatch("a", found_by_similarity=True, similarity_score=score)
            self.assertLess(calculate_fallback_score(match), 100)


if __name__ == '__main__':
    unittest.main()

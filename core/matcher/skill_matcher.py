#!/usr/bin/env python3
"""
Skill Matcher - Pair a job requirement with the best candidate skill.

Methods are tried in order and matching stops at the first that succeeds:
1. exact: case-insensitive name equality
2. containment: one normalized name is a substring of the other
3. synonym: both names map into the same canonical synonym group
4. edit_distance: Levenshtein distance <= 20% of the longer normalized name

Only an exact match earns full credit; every other method earns 80%.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from core.matcher.models import Skill
from core.matcher.synonyms import SynonymTable, DEFAULT_SYNONYM_TABLE, normalize_skill_name

EXACT_MATCH_CREDIT = 100
FUZZY_MATCH_CREDIT = 80
MAX_EDIT_DISTANCE_RATIO = 0.2


class MatchMethod(str, Enum):
    EXACT = "exact"
    CONTAINMENT = "containment"
    SYNONYM = "synonym"
    EDIT_DISTANCE = "edit_distance"


@dataclass(frozen=True)
class SkillMatch:
    """Best candidate skill for one requirement."""
    skill: Skill
    method: MatchMethod

    @property
    def credit(self) -> int:
        return EXACT_MATCH_CREDIT if self.method == MatchMethod.EXACT else FUZZY_MATCH_CREDIT

    @property
    def is_exact(self) -> bool:
        return self.method == MatchMethod.EXACT


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance (insert, delete, substitute all cost 1)."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost   # substitution
            ))
        previous = current
    return previous[-1]


class SkillMatcher:
    """Match requirement skill names against a candidate's skills."""

    def __init__(self, synonym_table: SynonymTable = DEFAULT_SYNONYM_TABLE):
        self.synonyms = synonym_table
        self._strategies: List[tuple] = [
            (MatchMethod.EXACT, self._exact),
            (MatchMethod.CONTAINMENT, self._containment),
            (MatchMethod.SYNONYM, self._synonym),
            (MatchMethod.EDIT_DISTANCE, self._edit_distance),
        ]

    def find_match(self, requirement_skill: str, candidate_skills: Sequence[Skill]) -> Optional[SkillMatch]:
        """
        Find the best candidate skill for a requirement.

        Every candidate skill is tried with a method before falling through
        to the next, weaker method.

        Returns:
            SkillMatch with the matched skill and method, or None
        """
        if not requirement_skill or not candidate_skills:
            return None

        for method, predicate in self._strategies:
            for skill in candidate_skills:
                if predicate(requirement_skill, skill.name):
                    return SkillMatch(skill=skill, method=method)
        return None

    def match_method(self, required: str, candidate: str) -> Optional[MatchMethod]:
        """Method by which two skill names match, or None."""
        for method, predicate in self._strategies:
            if predicate(required, candidate):
                return method
        return None

    @staticmethod
    def _exact(required: str, candidate: str) -> bool:
        return required.strip().lower() == candidate.strip().lower()

    @staticmethod
    def _containment(required: str, candidate: str) -> bool:
        req = normalize_skill_name(required)
        cand = normalize_skill_name(candidate)
        if not req or not cand:
            return False
        return req in cand or cand in req

    def _synonym(self, required: str, candidate: str) -> bool:
        return self.synonyms.are_synonyms(required, candidate)

    @staticmethod
    def _edit_distance(required: str, candidate: str) -> bool:
        req = normalize_skill_name(required)
        cand = normalize_skill_name(candidate)
        if not req or not cand:
            return False
        max_distance = max(len(req), len(cand)) * MAX_EDIT_DISTANCE_RATIO
        return levenshtein_distance(req, cand) <= max_distance

#!/usr/bin/env python3
"""
Skill Synonyms - Static abbreviation/variation table.

Built once at startup and shared read-only by every scoring call.
"""
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional
import re

_NON_ALNUM = re.compile(r'[^a-z0-9]')

DEFAULT_SKILL_VARIATIONS: Dict[str, List[str]] = {
    'javascript': ['js', 'ecmascript', 'es6', 'es2015'],
    'typescript': ['ts'],
    'python': ['py', 'python3'],
    'postgresql': ['postgres', 'psql', 'pgsql'],
    'mongodb': ['mongo'],
    'kubernetes': ['k8s'],
    'react': ['reactjs', 'react.js', 'reactnative'],
    'angular': ['angularjs', 'ng'],
    'vue': ['vuejs', 'vue.js', 'vue3'],
    'node': ['nodejs', 'node.js'],
    'aws': ['amazonwebservices', 'amazon web services', 'amazon'],
    'gcp': ['googlecloud', 'google cloud platform'],
    'azure': ['microsoftazure', 'microsoft azure'],
    'sql': ['mysql', 'mssql', 'tsql'],
    'excel': ['msexcel', 'microsoft excel'],
    'word': ['msword', 'microsoft word'],
    'powerpoint': ['mspowerpoint', 'ppt'],
    'accounting': ['bookkeeping', 'financial accounting'],
    'payroll': ['payroll processing', 'payroll management'],
}


def normalize_skill_name(name: str) -> str:
    """Lowercase and strip everything except a-z and 0-9."""
    return _NON_ALNUM.sub('', (name or '').lower())


class SynonymTable:
    """
    Immutable lookup from normalized skill name to canonical skill groups.

    Two names are synonyms when both normalize into the same canonical
    group (the canonical name itself or one of its aliases).
    """

    def __init__(self, variations: Mapping[str, Iterable[str]]):
        groups: Dict[str, FrozenSet[str]] = {}
        index: Dict[str, set] = {}

        for canonical, aliases in variations.items():
            key = normalize_skill_name(canonical)
            if not key:
                continue
            members = {key} | {normalize_skill_name(a) for a in aliases}
            members.discard('')
            groups[key] = frozenset(members | groups.get(key, frozenset()))

        for key, members in groups.items():
            for member in members:
                index.setdefault(member, set()).add(key)

        self._groups = MappingProxyType(groups)
        self._index = MappingProxyType({k: frozenset(v) for k, v in index.items()})

    @property
    def groups(self) -> Mapping[str, FrozenSet[str]]:
        return self._groups

    def canonical_names(self, name: str) -> FrozenSet[str]:
        """Canonical groups a (raw or normalized) skill name belongs to."""
        return self._index.get(normalize_skill_name(name), frozenset())

    def are_synonyms(self, first: str, second: str) -> bool:
        """Exact group membership after normalization.

        A name that merely contains an alias ("AWS Lambda" contains "aws")
        is not a member.
        """
        first_groups = self.canonical_names(first)
        if not first_groups:
            return False
        return bool(first_groups & self.canonical_names(second))

    def __len__(self) -> int:
        return len(self._groups)


def build_synonym_table(extra: Optional[Mapping[str, Iterable[str]]] = None) -> SynonymTable:
    """Build the table from the built-in variations plus configured extras."""
    variations: Dict[str, List[str]] = {k: list(v) for k, v in DEFAULT_SKILL_VARIATIONS.items()}
    for canonical, aliases in (extra or {}).items():
        variations.setdefault(canonical, []).extend(aliases)
    return SynonymTable(variations)


DEFAULT_SYNONYM_TABLE = build_synonym_table()

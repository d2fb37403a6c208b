#!/usr/bin/env python3
"""
Location Score - Heuristic string proximity between candidate and job location.

Not a geocoded distance: remote/unspecified jobs match everyone, substring
containment counts as the same place, a shared token (> 2 chars) counts as
the same broader region.
"""

from typing import Optional
import re

_TOKEN_SPLIT = re.compile(r'[,\s]+')

SAME_LOCATION = 100
SAME_REGION = 80
UNKNOWN_LOCATION = 50
DIFFERENT_LOCATION = 40
MIN_TOKEN_LENGTH = 3


def calculate_location_score(
    candidate_location: Optional[str],
    job_location: Optional[str]
) -> int:
    if not job_location or not job_location.strip() or 'remote' in job_location.lower():
        return SAME_LOCATION

    if not candidate_location or not candidate_location.strip():
        return UNKNOWN_LOCATION

    cand_loc = candidate_location.strip().lower()
    job_loc = job_location.strip().lower()

    if cand_loc in job_loc or job_loc in cand_loc:
        return SAME_LOCATION

    cand_parts = [p for p in _TOKEN_SPLIT.split(cand_loc) if len(p) >= MIN_TOKEN_LENGTH]
    job_parts = [p for p in _TOKEN_SPLIT.split(job_loc) if len(p) >= MIN_TOKEN_LENGTH]

    for cand_part in cand_parts:
        for job_part in job_parts:
            if cand_part in job_part or job_part in cand_part:
                return SAME_REGION

    return DIFFERENT_LOCATION

"""Skill gap analysis between a user's skills and a role's required skills.

Matching is exact on normalized labels (trimmed, lower-cased). Missing skills
are ranked by the priority table; equal scores keep their order from the
required list.
"""

import logging
from collections.abc import Sequence
from typing import Any

from models.schemas.gap_result import GapResult, PriorityItem
from services.priority_table import (
    DEFAULT_PRIORITY_TABLE,
    PriorityTable,
    normalize_skill,
    priority_reason,
)

logger = logging.getLogger(__name__)


class InvalidArgumentError(TypeError):
    """Raised when analyze() receives a non-sequence argument."""


def is_skill_sequence(value: Any) -> bool:
    """True for list-like input. Strings and bytes are not skill sequences."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _normalize_one(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    normalized = normalize_skill(value)
    return normalized or None


def normalize_skills(values: Any) -> list[str]:
    """Normalize a list of skill labels.

    Non-string and blank entries are dropped; duplicates are kept. Input that
    is not a sequence yields an empty list.
    """
    if not is_skill_sequence(values):
        return []
    normalized = (_normalize_one(v) for v in values)
    return [s for s in normalized if s is not None]


def analyze(
    profile_skills: Sequence[Any],
    required_skills: Sequence[Any],
    table: PriorityTable = DEFAULT_PRIORITY_TABLE,
) -> GapResult:
    """Compare profile skills against required skills.

    Required skills are not deduplicated: each occurrence lands in ``have`` or
    ``missing`` on its own.

    Raises:
        InvalidArgumentError: if either argument is not a sequence.
    """
    if not is_skill_sequence(profile_skills) or not is_skill_sequence(required_skills):
        raise InvalidArgumentError(
            "Both profile_skills and required_skills must be sequences"
        )

    profile_set = set(normalize_skills(profile_skills))
    required = normalize_skills(required_skills)

    have = [s for s in required if s in profile_set]
    missing = [s for s in required if s not in profile_set]

    # sorted() is stable, so equal scores keep their position from `missing`
    scored = [(table.score(s), s) for s in missing]
    ranked = sorted(scored, key=lambda item: -item[0])
    priority = [PriorityItem(skill=s, reason=priority_reason(value)) for value, s in ranked]

    logger.debug(
        "Skill gap: %d required, %d matched, %d missing",
        len(required), len(have), len(missing),
    )

    return GapResult(
        have=tuple(have),
        missing=tuple(missing),
        missing_count=len(missing),
        priority=tuple(priority),
    )

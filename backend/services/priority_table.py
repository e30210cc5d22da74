"""Static skill priority table used to rank missing skills.

Scores are a simplified demand heuristic in [0, 100]: the higher the score,
the more career paths list the skill. Skills absent from the table get the
table's default score.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from config import settings

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100

CRITICAL_THRESHOLD = 85
IMPORTANT_THRESHOLD = 70
VALUABLE_THRESHOLD = 60

CRITICAL_REASON = "Critical skill — highly demanded across most career paths"
IMPORTANT_REASON = "Important skill — commonly required in many positions"
VALUABLE_REASON = "Valuable skill — good to have for competitive advantage"
NICE_TO_HAVE_REASON = "Nice-to-have skill — may be beneficial for specific roles"

SKILL_PRIORITIES: dict[str, int] = {
    # Programming languages
    "javascript": 95,
    "python": 90,
    "java": 85,
    "typescript": 80,
    "c++": 75,
    "sql": 88,
    "html": 85,
    "css": 80,
    "react": 85,
    "node.js": 80,
    "angular": 70,
    "vue.js": 65,
    # Data & analytics
    "data analysis": 85,
    "machine learning": 80,
    "statistics": 75,
    "excel": 70,
    "tableau": 65,
    "power bi": 60,
    "r programming": 70,
    # Cloud & DevOps
    "aws": 85,
    "azure": 80,
    "docker": 75,
    "kubernetes": 70,
    "git": 90,
    "ci/cd": 70,
    # Soft skills
    "communication": 95,
    "leadership": 85,
    "problem solving": 90,
    "teamwork": 88,
    "project management": 80,
    "critical thinking": 85,
    # Design & UX
    "ui/ux design": 75,
    "figma": 70,
    "photoshop": 65,
    "wireframing": 60,
}


def normalize_skill(skill: str) -> str:
    """Canonical form of a skill label: trimmed and lower-cased."""
    return skill.strip().lower()


def _check_score(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Priority for {name!r} must be an integer, got {value!r}")
    if not MIN_SCORE <= value <= MAX_SCORE:
        raise ValueError(
            f"Priority for {name!r} must be in [{MIN_SCORE}, {MAX_SCORE}], got {value}"
        )


@dataclass(frozen=True)
class PriorityTable:
    """Read-only mapping of normalized skill -> priority score.

    Keys are normalized on construction, so lookups only need to normalize
    the query side.
    """

    scores: Mapping[str, int] = field(default_factory=dict)
    default: int = 50

    def __post_init__(self) -> None:
        _check_score("default", self.default)
        normalized: dict[str, int] = {}
        for name, value in self.scores.items():
            _check_score(name, value)
            key = normalize_skill(name)
            if key:
                normalized[key] = value
        object.__setattr__(self, "scores", MappingProxyType(normalized))

    def score(self, skill: str) -> int:
        return self.scores.get(normalize_skill(skill), self.default)

    def __contains__(self, skill: object) -> bool:
        return isinstance(skill, str) and normalize_skill(skill) in self.scores

    def __len__(self) -> int:
        return len(self.scores)


DEFAULT_PRIORITY_TABLE = PriorityTable(SKILL_PRIORITIES, default=settings.default_priority)
logger.debug("Priority table loaded with %d skills", len(DEFAULT_PRIORITY_TABLE))


def score(skill: str, table: PriorityTable = DEFAULT_PRIORITY_TABLE) -> int:
    """Priority score for a skill, falling back to the table default."""
    return table.score(skill)


def priority_reason(priority: int) -> str:
    """Human-readable explanation for a priority score."""
    if priority >= CRITICAL_THRESHOLD:
        return CRITICAL_REASON
    if priority >= IMPORTANT_THRESHOLD:
        return IMPORTANT_REASON
    if priority >= VALUABLE_THRESHOLD:
        return VALUABLE_REASON
    return NICE_TO_HAVE_REASON

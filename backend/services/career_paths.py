"""Career path catalog plus readiness scoring on top of a skill gap result."""

import math
from dataclasses import dataclass

from models.schemas.gap_result import GapResult


@dataclass(frozen=True)
class CareerPath:
    id: str
    title: str
    required_skills: tuple[str, ...]


@dataclass(frozen=True)
class Readiness:
    percentage: int
    level: str
    total_required: int
    currently_have: int


@dataclass(frozen=True)
class Recommendations:
    next_steps: list[str]
    time_estimate: str


CAREER_PATHS: dict[str, CareerPath] = {
    p.id: p
    for p in (
        CareerPath(
            id="frontend-developer",
            title="Frontend Developer",
            required_skills=(
                "html", "css", "javascript", "react", "typescript",
                "git", "figma", "responsive design",
            ),
        ),
        CareerPath(
            id="data-scientist",
            title="Data Scientist",
            required_skills=(
                "python", "machine learning", "statistics", "sql",
                "r programming", "tableau", "aws", "data analysis",
            ),
        ),
        CareerPath(
            id="backend-developer",
            title="Backend Developer",
            required_skills=(
                "node.js", "javascript", "sql", "mongodb",
                "express", "git", "docker", "aws",
            ),
        ),
        CareerPath(
            id="fullstack-developer",
            title="Full Stack Developer",
            required_skills=(
                "javascript", "react", "node.js", "sql", "git",
                "html", "css", "mongodb", "express",
            ),
        ),
    )
}

# (minimum percentage, label), highest first
READINESS_LEVELS: list[tuple[int, str]] = [
    (80, "Excellent - Ready to apply!"),
    (60, "Good - Minor skill gaps to address"),
    (40, "Moderate - Some important skills needed"),
    (0, "Beginner - Significant learning required"),
]

# Rough learning time per missing skill, in weeks
WEEKS_PER_SKILL_MIN = 2
WEEKS_PER_SKILL_MAX = 4


def get_career_path(path_id: str) -> CareerPath | None:
    return CAREER_PATHS.get(path_id)


def list_career_paths() -> list[CareerPath]:
    return list(CAREER_PATHS.values())


def readiness_level(percentage: int) -> str:
    for threshold, label in READINESS_LEVELS:
        if percentage >= threshold:
            return label
    return READINESS_LEVELS[-1][1]


def compute_readiness(gap: GapResult, total_required: int) -> Readiness:
    """Share of required skills already held, rounded half-up to a percentage."""
    currently_have = len(gap.have)
    if total_required > 0:
        percentage = math.floor(currently_have * 100 / total_required + 0.5)
    else:
        percentage = 0
    return Readiness(
        percentage=percentage,
        level=readiness_level(percentage),
        total_required=total_required,
        currently_have=currently_have,
    )


def build_recommendations(gap: GapResult, limit: int = 3) -> Recommendations:
    """Next skills to learn plus a coarse time estimate for the whole gap."""
    n = gap.missing_count
    return Recommendations(
        next_steps=[f"Learn {item.skill}" for item in gap.priority[:limit]],
        time_estimate=f"{n * WEEKS_PER_SKILL_MIN}-{n * WEEKS_PER_SKILL_MAX} weeks",
    )

from typing import Any

from pydantic import Field

from models.base import ApiModel


class SkillGapRequest(ApiModel):
    # Untyped so bad values get the router's 400 instead of a 422
    user_skills: Any = None
    career_path: Any = Field(None, description="Career path id, see /api/career-paths")


class ProfileRequest(ApiModel):
    """Profile fields accepted on create and update; checked in the router."""
    name: Any = None
    skills: Any = None
    email: str | None = None
    college: str | None = None
    year: str | None = None
    interests: list[str] | None = None
    experience: str | None = None
    goals: str | None = None
    quiz_answers: dict[str, str] | None = None

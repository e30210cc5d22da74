"""Stored user profile."""

from models.base import ApiModel


class Profile(ApiModel):
    id: int
    name: str
    skills: list[str] = []
    email: str = ""
    college: str = ""
    year: str = ""
    interests: list[str] = []
    experience: str = ""
    goals: str = ""
    quiz_answers: dict[str, str] = {}
    created_at: str = ""
    updated_at: str = ""

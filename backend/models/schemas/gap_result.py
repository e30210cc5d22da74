"""Skill gap analysis output: possessed/missing partitions and learning priority."""

from pydantic import BaseModel, ConfigDict


class PriorityItem(BaseModel):
    """A missing skill with the reason it should be learned."""
    model_config = ConfigDict(frozen=True)

    skill: str
    reason: str


class GapResult(BaseModel):
    """Immutable result of a single skill gap analysis.

    ``have`` and ``missing`` follow the order of the required skills list;
    ``priority`` holds the entries of ``missing`` ranked by descending score.
    """
    model_config = ConfigDict(frozen=True)

    have: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    missing_count: int = 0
    priority: tuple[PriorityItem, ...] = ()

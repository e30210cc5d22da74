"""Domain schemas shared between services and the API layer."""

from models.schemas.gap_result import GapResult, PriorityItem
from models.schemas.profile import Profile

__all__ = [
    "GapResult",
    "PriorityItem",
    "Profile",
]

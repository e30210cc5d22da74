"""In-memory profile storage.

Profiles live for the lifetime of the process. Ids are sequential from 1.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any

from models.schemas.profile import Profile

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProfileStore:
    def __init__(self) -> None:
        self._profiles: dict[int, Profile] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, data: dict[str, Any]) -> Profile:
        with self._lock:
            profile_id = self._next_id
            self._next_id += 1
            timestamp = _now()
            profile = Profile(
                **data,
                id=profile_id,
                created_at=timestamp,
                updated_at=timestamp,
            )
            self._profiles[profile_id] = profile
        logger.info("Profile created with ID: %d", profile_id)
        return profile

    def get(self, profile_id: int) -> Profile | None:
        with self._lock:
            return self._profiles.get(profile_id)

    def list_all(self) -> list[Profile]:
        with self._lock:
            return list(self._profiles.values())

    def update(self, profile_id: int, data: dict[str, Any]) -> Profile | None:
        """Merge ``data`` into an existing profile. Returns None if absent."""
        with self._lock:
            current = self._profiles.get(profile_id)
            if current is None:
                return None
            profile = current.model_copy(update={**data, "updated_at": _now()})
            self._profiles[profile_id] = profile
        logger.info("Profile updated: ID %d", profile_id)
        return profile

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._profiles)

    def clear(self) -> None:
        with self._lock:
            self._profiles.clear()
            self._next_id = 1


profile_store = ProfileStore()

"""Shared dependencies for API routes."""

import logging

from fastapi import Header, HTTPException

from config import settings
from services.priority_table import DEFAULT_PRIORITY_TABLE, PriorityTable
from services.profile_store import ProfileStore, profile_store

logger = logging.getLogger(__name__)


def get_priority_table() -> PriorityTable:
    return DEFAULT_PRIORITY_TABLE


def get_profile_store() -> ProfileStore:
    return profile_store


async def verify_api_key(x_api_key: str | None = Header(default=None)) -> None:
    """Require X-API-Key outside development when an API key is configured."""
    if not settings.api_key or settings.environment == "development":
        return
    if x_api_key != settings.api_key:
        logger.warning("Rejected request with invalid or missing API key")
        raise HTTPException(status_code=401, detail="Invalid or missing API key")

import logging
import re
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_priority_table, get_profile_store, verify_api_key
from config import settings
from models.requests import ProfileRequest, SkillGapRequest
from models.responses import (
    CareerPathsResponse,
    CareerPathSummary,
    GapAnalysis,
    ProfileCreatedResponse,
    ProfileListResponse,
    ProfileResponse,
    ReadinessResponse,
    RecommendationsResponse,
    SkillGapResponse,
    SkillPriorityResponse,
)
from services import career_paths, skill_gap
from services.priority_table import PriorityTable, normalize_skill, priority_reason
from services.profile_store import ProfileStore

logger = logging.getLogger(__name__)

router = APIRouter()
api_router = APIRouter(prefix="/api", dependencies=[Depends(verify_api_key)])
limiter = Limiter(key_func=get_remote_address)


def _rate_limit() -> str:
    return settings.rate_limit


@router.get("/")
async def index():
    return {
        "message": settings.app_name,
        "version": settings.version,
        "endpoints": {
            "health": "/health",
            "careerPaths": "/api/career-paths",
            "skillGapAnalysis": "/api/skill-gap-analysis",
            "skillPriority": "/api/skill-priority/{skill}",
            "profile": "/api/profile",
            "profiles": "/api/profiles",
        },
    }


@router.get("/health")
async def health(store: ProfileStore = Depends(get_profile_store)):
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "profilesCount": store.count,
    }


@api_router.get("/career-paths", response_model=CareerPathsResponse)
async def list_career_paths():
    return CareerPathsResponse(
        available_paths=[
            CareerPathSummary(
                id=p.id,
                title=p.title,
                required_skills_count=len(p.required_skills),
            )
            for p in career_paths.list_career_paths()
        ]
    )


@api_router.post("/skill-gap-analysis", response_model=SkillGapResponse)
@limiter.limit(_rate_limit)
async def skill_gap_analysis(
    request: Request,
    body: SkillGapRequest,
    table: PriorityTable = Depends(get_priority_table),
):
    if not skill_gap.is_skill_sequence(body.user_skills):
        raise HTTPException(status_code=400, detail="userSkills must be an array of strings")

    career = None
    if isinstance(body.career_path, str):
        career = career_paths.get_career_path(body.career_path)
    if career is None:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Invalid career path",
                "availablePaths": list(career_paths.CAREER_PATHS),
            },
        )

    gap = skill_gap.analyze(body.user_skills, career.required_skills, table)
    readiness = career_paths.compute_readiness(gap, len(career.required_skills))
    recommendations = career_paths.build_recommendations(gap)
    logger.info(
        "Skill gap for %s: %d/%d skills matched",
        career.id, readiness.currently_have, readiness.total_required,
    )

    return SkillGapResponse(
        career_path=career.title,
        user_skills=list(body.user_skills),
        required_skills=list(career.required_skills),
        analysis=GapAnalysis(
            skills_matched=gap.have,
            skills_missing=gap.missing,
            missing_count=gap.missing_count,
            learning_priority=gap.priority,
        ),
        readiness=ReadinessResponse(**asdict(readiness)),
        recommendations=RecommendationsResponse(**asdict(recommendations)),
    )


@api_router.get("/skill-priority/{skill:path}", response_model=SkillPriorityResponse)
async def skill_priority(skill: str, table: PriorityTable = Depends(get_priority_table)):
    normalized = normalize_skill(skill)
    if not normalized:
        raise HTTPException(status_code=400, detail="Skill must be a non-empty string")
    value = table.score(normalized)
    return SkillPriorityResponse(skill=normalized, score=value, reason=priority_reason(value))


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise HTTPException(status_code=400, detail="Name is required and must be a non-empty string")
    return name.strip()


def _validate_skills(skills: Any) -> list[str]:
    if not isinstance(skills, list):
        raise HTTPException(status_code=400, detail="Skills is required and must be an array")
    if not skills:
        raise HTTPException(status_code=400, detail="Skills array cannot be empty")
    if any(not isinstance(s, str) or not s.strip() for s in skills):
        raise HTTPException(status_code=400, detail="All skills must be non-empty strings")
    return [s.strip() for s in skills]


def _parse_profile_id(raw: str) -> int:
    if not re.fullmatch(r"-?[0-9]+", raw):
        raise HTTPException(status_code=400, detail="Profile ID must be a valid number")
    return int(raw)


@api_router.post("/profile", status_code=201, response_model=ProfileCreatedResponse)
@limiter.limit(_rate_limit)
async def create_profile(
    request: Request,
    body: ProfileRequest,
    store: ProfileStore = Depends(get_profile_store),
):
    data = body.model_dump(exclude_none=True)
    data["name"] = _validate_name(body.name)
    data["skills"] = _validate_skills(body.skills)
    profile = store.create(data)
    return ProfileCreatedResponse(id=profile.id)


@api_router.get("/profile/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: str, store: ProfileStore = Depends(get_profile_store)):
    profile = store.get(_parse_profile_id(profile_id))
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileResponse(data=profile)


@api_router.put("/profile/{profile_id}", response_model=ProfileResponse)
@limiter.limit(_rate_limit)
async def update_profile(
    request: Request,
    profile_id: str,
    body: ProfileRequest,
    store: ProfileStore = Depends(get_profile_store),
):
    pid = _parse_profile_id(profile_id)
    data = body.model_dump(exclude_none=True)
    if body.name is not None:
        data["name"] = _validate_name(body.name)
    if body.skills is not None:
        data["skills"] = _validate_skills(body.skills)

    profile = store.update(pid, data)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileResponse(data=profile)


@api_router.get("/profiles", response_model=ProfileListResponse)
async def list_profiles(store: ProfileStore = Depends(get_profile_store)):
    profiles = store.list_all()
    return ProfileListResponse(data=profiles, count=len(profiles))

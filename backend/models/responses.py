from models.base import ApiModel
from models.schemas.gap_result import PriorityItem
from models.schemas.profile import Profile


class GapAnalysis(ApiModel):
    skills_matched: list[str] = []
    skills_missing: list[str] = []
    missing_count: int = 0
    learning_priority: list[PriorityItem] = []


class ReadinessResponse(ApiModel):
    percentage: int = 0
    level: str = ""
    total_required: int = 0
    currently_have: int = 0


class RecommendationsResponse(ApiModel):
    next_steps: list[str] = []
    time_estimate: str = ""


class SkillGapResponse(ApiModel):
    career_path: str
    user_skills: list = []
    required_skills: list[str] = []
    analysis: GapAnalysis = GapAnalysis()
    readiness: ReadinessResponse = ReadinessResponse()
    recommendations: RecommendationsResponse = RecommendationsResponse()


class CareerPathSummary(ApiModel):
    id: str
    title: str
    required_skills_count: int = 0


class CareerPathsResponse(ApiModel):
    available_paths: list[CareerPathSummary] = []


class SkillPriorityResponse(ApiModel):
    skill: str
    score: int
    reason: str


class ProfileCreatedResponse(ApiModel):
    success: bool = True
    id: int
    message: str = "Profile created successfully"


class ProfileResponse(ApiModel):
    success: bool = True
    data: Profile


class ProfileListResponse(ApiModel):
    success: bool = True
    data: list[Profile] = []
    count: int = 0

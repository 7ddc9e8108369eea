from pydantic import BaseModel, Field

from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult, WeightMap
from models.schemas.user_profile import UserProfile, UserSkill

MAX_BATCH_JOBS = 200


class MatchRequest(BaseModel):
    job: JobPosting
    profile: UserProfile
    weights: WeightMap | None = Field(None, description="Optional category weights; any positive total")


class ReweightRequest(BaseModel):
    match: MatchResult
    weights: WeightMap


class CompareRequest(BaseModel):
    jobs: list[JobPosting] = Field(..., max_length=MAX_BATCH_JOBS)
    profile: UserProfile
    weights: WeightMap | None = None


class ReportRequest(BaseModel):
    match: MatchResult
    job: JobPosting | None = None


class HistoryRequest(BaseModel):
    matches: list[MatchResult] = Field(..., min_length=1)


class SkillGapRequest(BaseModel):
    job: JobPosting
    skills: list[UserSkill] = []


class TrendRequest(BaseModel):
    jobs: list[JobPosting] = Field(..., max_length=MAX_BATCH_JOBS)
    skills: list[UserSkill] = []

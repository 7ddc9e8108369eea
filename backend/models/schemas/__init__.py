"""Pydantic contracts shared by the matching engine and the API."""

from models.schemas.job_posting import JobPosting, SalaryRange
from models.schemas.user_profile import (
    Certification,
    Education,
    Employment,
    Project,
    UserProfile,
    UserSkill,
)
from models.schemas.skill_gap import SkillGapAnalysis, SkillGapReport, SkillRecord
from models.schemas.trend_report import TrendReport
from models.schemas.match_result import CategoryScores, MatchResult, WeightMap
from models.schemas.comparison import BatchMatchResult, Comparison, MatchHistory

__all__ = [
    "JobPosting",
    "SalaryRange",
    "Certification",
    "Education",
    "Employment",
    "Project",
    "UserProfile",
    "UserSkill",
    "SkillGapAnalysis",
    "SkillGapReport",
    "SkillRecord",
    "TrendReport",
    "CategoryScores",
    "MatchResult",
    "WeightMap",
    "BatchMatchResult",
    "Comparison",
    "MatchHistory",
]

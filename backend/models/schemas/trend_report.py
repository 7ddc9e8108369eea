"""Cross-job skill trend report."""

from typing import Literal

from pydantic import BaseModel

from models.schemas.skill_gap import Importance


class TrendingSkill(BaseModel):
    skill: str
    frequency: int = 0  # number of jobs mentioning the skill
    percentage: int = 0  # frequency / jobs analyzed, 0-100
    importance: Importance = "nice-to-have"  # highest importance seen
    has_skill: bool = False


class TrendRecommendation(BaseModel):
    type: Literal["strength", "gap"]
    message: str
    skills: list[TrendingSkill] = []


class TrendReport(BaseModel):
    total_jobs_analyzed: int = 0
    trending: list[TrendingSkill] = []
    critical_gaps: list[TrendingSkill] = []
    recommendations: list[TrendRecommendation] = []

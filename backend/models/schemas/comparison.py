"""Cross-job comparison, match history and batch outputs."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from models.schemas.match_result import MatchResult


class MatchSummary(BaseModel):
    job: str  # "<title> at <company>"
    score: int
    id: str | None = None


class ComparisonRecommendation(BaseModel):
    type: Literal["action", "warning", "improvement"]
    message: str


class ScoreDistribution(BaseModel):
    excellent: int = 0  # >= 85
    good: int = 0  # [70, 85)
    fair: int = 0  # [55, 70)
    poor: int = 0  # < 55


class Comparison(BaseModel):
    total_jobs: int = 0
    average_score: int = 0
    best_match: MatchSummary | None = None
    worst_match: MatchSummary | None = None
    recommendations: list[ComparisonRecommendation] = []
    score_distribution: ScoreDistribution = ScoreDistribution()


class HistoryTrend(BaseModel):
    direction: Literal["improving", "declining", "stable"] = "stable"
    change: int = 0
    first_score: int = 0
    latest_score: int = 0


class TimelinePoint(BaseModel):
    date: datetime
    score: int
    skills: int
    experience: int
    education: int
    additional: int


class MatchHistory(BaseModel):
    """How repeated matches of one job evolved over time."""
    trend: HistoryTrend = HistoryTrend()
    timeline: list[TimelinePoint] = []


class BatchMatchResult(BaseModel):
    """Outcome of a dispatched batch; `matches` keeps input order."""
    matches: list[MatchResult] = []
    cancelled: bool = False
    skipped: int = 0  # jobs never started because the batch was cancelled

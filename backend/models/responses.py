from pydantic import BaseModel

from models.schemas.comparison import Comparison
from models.schemas.match_result import MatchResult


class HealthResponse(BaseModel):
    status: str = "ok"
    skills_in_catalog: int = 0


class BatchComparisonResponse(BaseModel):
    matches: list[MatchResult] = []
    comparison: Comparison = Comparison()
    cancelled: bool = False
    skipped: int = 0

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    CompareRequest,
    HistoryRequest,
    MatchRequest,
    ReportRequest,
    ReweightRequest,
    SkillGapRequest,
    TrendRequest,
)
from models.responses import BatchComparisonResponse, HealthResponse
from models.schemas.comparison import MatchHistory
from models.schemas.match_result import MatchResult
from models.schemas.skill_gap import SkillGapReport
from models.schemas.trend_report import TrendReport
from services.matching import aggregator, orchestrator, report
from services.skill_catalog import get_default_catalog
from services.skill_gap_report import build_skill_gap_report
from services.skill_trends import analyze_skill_trends

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", skills_in_catalog=len(get_default_catalog().skills))


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
def match(request: Request, body: MatchRequest):
    try:
        return aggregator.calculate_job_match(body.job, body.profile, body.weights)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/match/weights", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
def reweight(request: Request, body: ReweightRequest):
    try:
        return aggregator.apply_weights(body.match, body.weights)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/match/compare", response_model=BatchComparisonResponse)
@limiter.limit(settings.rate_limit)
async def compare(request: Request, body: CompareRequest):
    try:
        batch, comparison = await orchestrator.compare_jobs(body.jobs, body.profile, body.weights)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BatchComparisonResponse(
        matches=batch.matches,
        comparison=comparison,
        cancelled=batch.cancelled,
        skipped=batch.skipped,
    )


@router.post("/match/report", response_class=PlainTextResponse)
@limiter.limit(settings.rate_limit)
def match_report(request: Request, body: ReportRequest):
    return PlainTextResponse(report.render_match_report(body.match, body.job))


@router.post("/match/history", response_model=MatchHistory)
@limiter.limit(settings.rate_limit)
def match_history(request: Request, body: HistoryRequest):
    return report.summarize_match_history(body.matches)


@router.post("/skill-gaps", response_model=SkillGapReport)
@limiter.limit(settings.rate_limit)
def skill_gaps(request: Request, body: SkillGapRequest):
    return build_skill_gap_report(body.job, body.skills)


@router.post("/skill-gaps/trends", response_model=TrendReport)
@limiter.limit(settings.rate_limit)
def skill_trends(request: Request, body: TrendRequest):
    return analyze_skill_trends(body.jobs, body.skills)

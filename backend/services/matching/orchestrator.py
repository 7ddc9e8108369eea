"""Batch dispatcher: score many jobs against one profile.

Flow:
    jobs[] + profile
      ├─ for each job (at most `max_concurrency` in flight):
      │     cancel_event set?  → skip, never started
      │     asyncio.to_thread(calculate_job_match)  → MatchResult
      │              ↓
      └─ BatchMatchResult(matches in input order, cancelled, skipped)
                       ↓
         compare_job_matches()  → Comparison   (compare_jobs only)

Cancellation only stops new work; a computation already running finishes.
"""

import asyncio
import logging
import time
from datetime import date

from config import settings
from models.schemas.comparison import BatchMatchResult, Comparison
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult, WeightMap
from models.schemas.user_profile import UserProfile
from services.matching.aggregator import calculate_job_match
from services.matching.comparison import compare_job_matches
from services.skill_catalog import SkillCatalog, resolve_catalog

logger = logging.getLogger(__name__)


async def score_jobs(
    jobs: list[JobPosting],
    profile: UserProfile,
    weights: WeightMap | None = None,
    *,
    max_concurrency: int | None = None,
    cancel_event: asyncio.Event | None = None,
    catalog: SkillCatalog | None = None,
    today: date | None = None,
) -> BatchMatchResult:
    """Compute a MatchResult per job with bounded concurrency."""
    limit = settings.batch_max_concurrency if max_concurrency is None else max_concurrency
    if limit < 1:
        raise ValueError(f"max_concurrency must be positive, got {limit}")
    catalog = resolve_catalog(catalog)

    semaphore = asyncio.Semaphore(limit)
    results: list[MatchResult | None] = [None] * len(jobs)
    started = time.perf_counter()

    async def _run(index: int, job: JobPosting) -> None:
        async with semaphore:
            if cancel_event is not None and cancel_event.is_set():
                return
            results[index] = await asyncio.to_thread(
                calculate_job_match, job, profile, weights, catalog, today
            )

    await asyncio.gather(*(_run(i, job) for i, job in enumerate(jobs)))

    matches = [r for r in results if r is not None]
    skipped = len(jobs) - len(matches)
    cancelled = cancel_event is not None and cancel_event.is_set()
    logger.info(
        "Scored %d/%d jobs%s",
        len(matches), len(jobs), " (cancelled)" if cancelled else "",
        extra={
            "batch_size": len(jobs),
            "latency_ms": round((time.perf_counter() - started) * 1000, 1),
        },
    )
    return BatchMatchResult(matches=matches, cancelled=cancelled, skipped=skipped)


async def compare_jobs(
    jobs: list[JobPosting],
    profile: UserProfile,
    weights: WeightMap | None = None,
    *,
    max_concurrency: int | None = None,
    cancel_event: asyncio.Event | None = None,
    catalog: SkillCatalog | None = None,
) -> tuple[BatchMatchResult, Comparison]:
    """Score a batch, then compare whatever finished."""
    batch = await score_jobs(
        jobs,
        profile,
        weights,
        max_concurrency=max_concurrency,
        cancel_event=cancel_event,
        catalog=catalog,
    )
    return batch, compare_job_matches(batch.matches)

"""Skill demand trends across a set of job postings."""

import logging

from models.schemas.job_posting import JobPosting
from models.schemas.trend_report import TrendingSkill, TrendRecommendation, TrendReport
from models.schemas.user_profile import UserSkill
from services.numeric import round_half_up
from services.skill_catalog import SkillCatalog, resolve_catalog
from services.skill_extractor import extract_job_skills

logger = logging.getLogger(__name__)

TOP_TRENDING = 10
TOP_CRITICAL_GAPS = 5
CRITICAL_GAP_SHARE = 0.5  # skill must appear in at least half the jobs
MIN_GAP_FREQUENCY = 3


def analyze_skill_trends(
    jobs: list[JobPosting],
    user_skills: list[UserSkill],
    catalog: SkillCatalog | None = None,
) -> TrendReport:
    """Aggregate skill frequency and peak importance over *jobs*."""
    catalog = resolve_catalog(catalog)
    if not jobs:
        return TrendReport()

    # lower-cased name -> [display name, frequency, importance]
    stats: dict[str, list] = {}
    for job in jobs:
        for skill in extract_job_skills(job, catalog):
            key = skill.name.lower()
            entry = stats.setdefault(key, [skill.name, 0, skill.importance])
            entry[1] += 1
            if catalog.importance_weight(skill.importance) > catalog.importance_weight(entry[2]):
                entry[2] = skill.importance

    user_names = {s.name.lower() for s in user_skills}
    ranked = sorted(
        (
            TrendingSkill(
                skill=name,
                frequency=frequency,
                percentage=round_half_up(frequency / len(jobs) * 100),
                importance=importance,
                has_skill=key in user_names,
            )
            for key, (name, frequency, importance) in stats.items()
        ),
        key=lambda t: t.frequency,
        reverse=True,
    )

    critical_gaps = [
        t for t in ranked
        if not t.has_skill and t.frequency >= len(jobs) * CRITICAL_GAP_SHARE
    ][:TOP_CRITICAL_GAPS]

    logger.info(
        "Analyzed %d jobs: %d distinct skills, %d critical gaps",
        len(jobs), len(ranked), len(critical_gaps),
    )
    return TrendReport(
        total_jobs_analyzed=len(jobs),
        trending=ranked[:TOP_TRENDING],
        critical_gaps=critical_gaps,
        recommendations=_trend_recommendations(ranked),
    )


def _trend_recommendations(ranked: list[TrendingSkill]) -> list[TrendRecommendation]:
    recommendations: list[TrendRecommendation] = []

    strengths = [t for t in ranked if t.has_skill][:3]
    if strengths:
        recommendations.append(TrendRecommendation(
            type="strength",
            message=f"Your skills in {', '.join(t.skill for t in strengths)} are in high demand",
            skills=strengths,
        ))

    gaps = [t for t in ranked if not t.has_skill and t.frequency >= MIN_GAP_FREQUENCY][:3]
    if gaps:
        recommendations.append(TrendRecommendation(
            type="gap",
            message=f"Consider learning {', '.join(t.skill for t in gaps)} - these appear frequently",
            skills=gaps,
        ))

    return recommendations

"""Single-job skill gap report: extraction, gap analysis and learning plan."""

import logging
from datetime import datetime, timezone

from models.schemas.job_posting import JobPosting
from models.schemas.skill_gap import JobSummary, SkillGapReport
from models.schemas.user_profile import UserSkill
from services.learning import generate_learning_path, suggest_learning_resources
from services.skill_catalog import SkillCatalog, resolve_catalog
from services.skill_extractor import extract_job_skills
from services.skill_gap import analyze_skill_gap

logger = logging.getLogger(__name__)


def build_skill_gap_report(
    job: JobPosting,
    user_skills: list[UserSkill],
    catalog: SkillCatalog | None = None,
) -> SkillGapReport:
    """Extract the job's skills, analyze the gap, then attach resources and a path."""
    catalog = resolve_catalog(catalog)
    job_skills = extract_job_skills(job, catalog)
    analysis = analyze_skill_gap(user_skills, job_skills, catalog)

    gaps = analysis.missing + analysis.weak
    report = SkillGapReport(
        job=JobSummary(id=job.id, title=job.title, company=job.company),
        analysis=analysis,
        learning_resources=suggest_learning_resources(gaps, catalog),
        learning_path=generate_learning_path(gaps, user_skills, catalog),
        analyzed_at=datetime.now(timezone.utc),
    )
    logger.info(
        "Skill gap for job %s: %d matched, %d weak, %d missing",
        job.id or job.title, len(analysis.matched), len(analysis.weak), len(analysis.missing),
    )
    return report

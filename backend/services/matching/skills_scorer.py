"""Skills category: required/preferred coverage minus a weak-skill penalty."""

import logging

from models.schemas.job_posting import JobPosting
from models.schemas.match_result import SkillsDetails, SkillsScore, WeakSkill
from models.schemas.user_profile import UserProfile
from services.numeric import clamp_score
from services.skill_catalog import SkillCatalog, resolve_catalog
from services.skill_extractor import extract_job_skills
from services.skill_gap import analyze_skill_gap

logger = logging.getLogger(__name__)

REQUIRED_POINTS = 70
PREFERRED_POINTS = 30
WEAK_PENALTY = 5


def calculate_skills_score(
    job: JobPosting, profile: UserProfile, catalog: SkillCatalog | None = None
) -> SkillsScore:
    """Score 0-100 for skill coverage.

    A posting with no extractable skills scores 0: every real job needs
    skills, so an empty list means the posting data is insufficient.
    """
    catalog = resolve_catalog(catalog)
    job_skills = extract_job_skills(job, catalog)

    if not job_skills:
        logger.debug("No skills extracted for job %r; skills score forced to 0", job.title)
        return SkillsScore(score=0, details=SkillsDetails(insufficient_data=True))

    analysis = analyze_skill_gap(profile.skills, job_skills, catalog)
    matched_required = sum(1 for s in analysis.matched if s.importance == "required")
    matched_preferred = len(analysis.matched) - matched_required
    total_required = sum(1 for s in job_skills if s.importance == "required")
    total_preferred = len(job_skills) - total_required

    required_score = (
        matched_required / total_required * REQUIRED_POINTS if total_required else REQUIRED_POINTS
    )
    preferred_score = (
        matched_preferred / total_preferred * PREFERRED_POINTS if total_preferred else PREFERRED_POINTS
    )
    weak_penalty = WEAK_PENALTY * len(analysis.weak)

    return SkillsScore(
        score=clamp_score(required_score + preferred_score - weak_penalty),
        details=SkillsDetails(
            matched=[s.name for s in analysis.matched],
            missing=[s.name for s in analysis.missing],
            weak=[WeakSkill(name=s.name, user_level=s.user_level) for s in analysis.weak],
            matched_count=len(analysis.matched),
            total_required=len(job_skills),
        ),
    )

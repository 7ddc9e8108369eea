"""Learning recommendations for skill gaps: resource links and a phased path."""

import logging
import math
from urllib.parse import quote

from config import settings
from models.schemas.skill_gap import (
    GapSkill,
    LearningDuration,
    LearningPath,
    LearningPhases,
    LearningResource,
    PhaseRecommendation,
    SkillResources,
)
from models.schemas.user_profile import UserSkill
from services.skill_catalog import SkillCatalog, resolve_catalog
from services.skill_gap import MATCH_LEVEL_THRESHOLD, level_score

logger = logging.getLogger(__name__)

# Study hours per skill in each phase
PHASE_HOURS: dict[str, int] = {
    "foundation": 20,
    "intermediate": 15,
    "advanced": 10,
}

_PHASE_COPY: dict[str, tuple[str, str, str]] = {
    "foundation": (
        "Build Your Foundation",
        "Start with these essential skills to build a strong base",
        "high",
    ),
    "intermediate": (
        "Develop Core Competencies",
        "Strengthen your skillset with these important capabilities",
        "medium",
    ),
    "advanced": (
        "Stand Out Skills",
        "Master these advanced skills to differentiate yourself",
        "low",
    ),
}


def platform_url(base_url: str, skill_name: str) -> str:
    """Search URL for a skill, escaped like encodeURIComponent."""
    return base_url + quote(skill_name, safe="-_.!~*'()")


def suggest_learning_resources(
    gaps: list[GapSkill], catalog: SkillCatalog | None = None
) -> list[SkillResources]:
    """One course link per learning platform, plus official docs when known."""
    catalog = resolve_catalog(catalog)
    results: list[SkillResources] = []
    for gap in gaps:
        resources = [
            LearningResource(
                platform=platform,
                title=f"{gap.name} courses on {platform}",
                url=platform_url(base_url, gap.name),
                type="course",
            )
            for platform, base_url in catalog.learning_platforms.items()
        ]
        docs = catalog.official_docs.get(gap.name)
        if docs:
            title, url = docs
            resources.append(LearningResource(title=title, url=url, type="documentation"))
        results.append(SkillResources(
            skill=gap.name,
            importance=gap.importance,
            priority=gap.priority,
            resources=resources,
        ))
    return results


def determine_phase(gap: GapSkill, user_skills: list[UserSkill], catalog: SkillCatalog) -> str:
    """Foundation unless the user already holds a related skill at Intermediate+."""
    category = catalog.categorize(gap.name)
    has_related = any(
        s.category == category and level_score(s.level) >= MATCH_LEVEL_THRESHOLD
        for s in user_skills
    )
    if has_related:
        return "intermediate" if gap.importance == "required" else "advanced"
    return "foundation"


def calculate_learning_duration(
    phases: LearningPhases, hours_per_week: int | None = None
) -> LearningDuration:
    hours_per_week = hours_per_week or settings.study_hours_per_week
    breakdown = {
        phase: len(getattr(phases, phase)) * hours
        for phase, hours in PHASE_HOURS.items()
    }
    total_hours = sum(breakdown.values())
    return LearningDuration(
        hours=total_hours,
        weeks=math.ceil(total_hours / hours_per_week),
        breakdown=breakdown,
    )


def _phase_recommendations(phases: LearningPhases) -> list[PhaseRecommendation]:
    recommendations: list[PhaseRecommendation] = []
    for phase, (title, description, priority) in _PHASE_COPY.items():
        skills = getattr(phases, phase)
        if skills:
            recommendations.append(PhaseRecommendation(
                phase=phase,
                title=title,
                description=description,
                skills=[s.name for s in skills[:3]],
                priority=priority,
            ))
    return recommendations


def generate_learning_path(
    gaps: list[GapSkill],
    user_skills: list[UserSkill],
    catalog: SkillCatalog | None = None,
) -> LearningPath:
    """Bucket gaps into phases (highest priority first) and estimate study time."""
    catalog = resolve_catalog(catalog)
    phases = LearningPhases()
    for gap in sorted(gaps, key=lambda g: g.priority, reverse=True):
        getattr(phases, determine_phase(gap, user_skills, catalog)).append(gap)

    path = LearningPath(
        phases=phases,
        estimated_duration=calculate_learning_duration(phases),
        recommendations=_phase_recommendations(phases),
    )
    logger.debug(
        "Learning path: %d foundation, %d intermediate, %d advanced",
        len(phases.foundation), len(phases.intermediate), len(phases.advanced),
    )
    return path

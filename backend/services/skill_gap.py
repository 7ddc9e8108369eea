"""Skill gap analysis: compare a user's skills against a job's skills."""

from models.schemas.skill_gap import (
    GapSkill,
    GapSummary,
    SkillGapAnalysis,
    SkillRecord,
)
from models.schemas.user_profile import UserSkill
from services.numeric import round_half_up
from services.skill_catalog import SkillCatalog, resolve_catalog

LEVEL_SCORES: dict[str, int] = {
    "Beginner": 1,
    "Intermediate": 2,
    "Advanced": 3,
    "Expert": 4,
}

# Gap multipliers applied to the importance weight
MISSING_MULTIPLIER = 2.0
WEAK_MULTIPLIER = 1.5

# Minimum level score that counts as a real match (Intermediate)
MATCH_LEVEL_THRESHOLD = 2


def level_score(level: str) -> int:
    """Numeric proficiency; unknown levels score 0."""
    return LEVEL_SCORES.get(level, 0)


def calculate_priority(importance: str, gap: str, catalog: SkillCatalog | None = None) -> float:
    """Priority of a skill gap: importance weight x gap multiplier."""
    weight = resolve_catalog(catalog).importance_weight(importance)
    multiplier = MISSING_MULTIPLIER if gap == "missing" else WEAK_MULTIPLIER
    return weight * multiplier


def analyze_skill_gap(
    user_skills: list[UserSkill],
    job_skills: list[SkillRecord],
    catalog: SkillCatalog | None = None,
) -> SkillGapAnalysis:
    """Partition job skills into matched / weak / missing.

    Every job skill lands in exactly one bucket. Names are compared
    case-insensitively; no synonym folding ("JS" is not "JavaScript").
    """
    catalog = resolve_catalog(catalog)
    user_by_name = {s.name.lower(): s for s in user_skills}

    matched: list[GapSkill] = []
    weak: list[GapSkill] = []
    missing: list[GapSkill] = []

    for job_skill in job_skills:
        user_skill = user_by_name.get(job_skill.name.lower())
        base = job_skill.model_dump()

        if user_skill is None:
            missing.append(GapSkill(
                **base,
                gap="missing",
                priority=calculate_priority(job_skill.importance, "missing", catalog),
            ))
        elif level_score(user_skill.level) < MATCH_LEVEL_THRESHOLD:
            weak.append(GapSkill(
                **base,
                user_level=user_skill.level,
                gap="weak",
                priority=calculate_priority(job_skill.importance, "weak", catalog),
            ))
        else:
            matched.append(GapSkill(
                **base,
                user_level=user_skill.level,
                user_category=user_skill.category,
            ))

    # sort() is stable: equal priorities keep extraction order
    missing.sort(key=lambda s: s.priority, reverse=True)
    weak.sort(key=lambda s: s.priority, reverse=True)

    total = len(job_skills)
    return SkillGapAnalysis(
        matched=matched,
        weak=weak,
        missing=missing,
        match_percentage=round_half_up(len(matched) / total * 100) if total else 0,
        total_required=total,
        summary=GapSummary(matched=len(matched), weak=len(weak), missing=len(missing)),
    )

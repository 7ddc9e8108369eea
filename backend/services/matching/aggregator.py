"""Match aggregation: weighted overall score, strengths, gaps and suggestions.

Flow:
    job + profile
      ├─ calculate_skills_score      → SkillsScore
      ├─ calculate_experience_score  → ExperienceScore
      ├─ calculate_education_score   → EducationScore
      ├─ calculate_additional_score  → AdditionalScore
      │              ↓
      ├─ compute_overall_score(category_scores, normalized weights)
      ├─ identify_strengths / identify_gaps
      └─ generate_suggestions(gaps)  → MatchResult
"""

import logging
from datetime import date, datetime, timezone

from config import settings
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import (
    CategoryScores,
    GapEntry,
    MatchMetadata,
    MatchResult,
    Strength,
    Suggestion,
    SuggestionResource,
    WeightMap,
    grade_for_score,
)
from models.schemas.user_profile import UserProfile
from services.learning import platform_url
from services.matching.additional_scorer import calculate_additional_score
from services.matching.education_scorer import calculate_education_score
from services.matching.experience_scorer import calculate_experience_score
from services.matching.skills_scorer import calculate_skills_score
from services.numeric import round_half_up
from services.skill_catalog import PRACTICE_RESOURCE, SkillCatalog, resolve_catalog

logger = logging.getLogger(__name__)

ALGORITHM_VERSION = "1.0"
STRONG_SCORE = 80
PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}
SUGGESTION_PLATFORMS = ("Coursera", "Udemy")
MIN_HEADLINE_LENGTH = 20
MIN_PROJECTS = 2


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------

def default_weights() -> WeightMap:
    return WeightMap(**settings.default_weights.model_dump())


def normalize_weights(weights: WeightMap) -> WeightMap:
    """Scale weights to sum to 100. Already-normalized maps come back unchanged."""
    total = weights.total
    return WeightMap(
        skills=weights.skills / total * 100,
        experience=weights.experience / total * 100,
        education=weights.education / total * 100,
        additional=weights.additional / total * 100,
    )


def compute_overall_score(category_scores: CategoryScores, weights: WeightMap) -> int:
    """Weighted mean of the four category scores, rounded half up."""
    w = normalize_weights(weights)
    raw = (
        category_scores.skills.score * w.skills
        + category_scores.experience.score * w.experience
        + category_scores.education.score * w.education
        + category_scores.additional.score * w.additional
    ) / 100
    return round_half_up(raw)


def recalculate_overall_score(category_scores: CategoryScores, new_weights: WeightMap) -> int:
    """Overall score for existing category scores under new weights.

    Category scores are taken as-is and never re-derived.
    """
    return compute_overall_score(category_scores, new_weights)


def apply_weights(match: MatchResult, new_weights: WeightMap) -> MatchResult:
    """Copy of *match* re-weighted; persisting it is the caller's job."""
    updated = match.model_copy(deep=True)
    scores = updated.category_scores
    scores.skills.weight = new_weights.skills
    scores.experience.weight = new_weights.experience
    scores.education.weight = new_weights.education
    scores.additional.weight = new_weights.additional
    updated.custom_weights = new_weights
    updated.overall_score = recalculate_overall_score(scores, new_weights)
    return updated


def match_grade(score: int) -> str:
    return grade_for_score(score)


# ---------------------------------------------------------------------------
# Strengths & gaps
# ---------------------------------------------------------------------------

def identify_strengths(scores: CategoryScores) -> list[Strength]:
    strengths: list[Strength] = []
    skills = scores.skills.details
    experience = scores.experience.details
    additional = scores.additional.details

    if scores.skills.score >= STRONG_SCORE:
        strengths.append(Strength(
            category="skills",
            description=(
                f"Strong skill match with {skills.matched_count} out of "
                f"{skills.total_required} required skills"
            ),
            impact="high",
        ))
    if skills.matched:
        strengths.append(Strength(
            category="skills",
            description=f"Key skills: {', '.join(skills.matched[:3])}",
            impact="medium",
        ))

    if scores.experience.score >= STRONG_SCORE:
        strengths.append(Strength(
            category="experience",
            description=f"{experience.years_experience:g} years of relevant experience exceeds requirements",
            impact="high",
        ))
    if any(p.relevance == "high" for p in experience.relevant_positions):
        strengths.append(Strength(
            category="experience",
            description="Highly relevant previous positions",
            impact="high",
        ))
    if experience.industry_match:
        strengths.append(Strength(
            category="experience",
            description="Industry experience matches job requirements",
            impact="medium",
        ))

    if scores.education.score >= STRONG_SCORE:
        strengths.append(Strength(
            category="education",
            description="Education background aligns well with requirements",
            impact="medium",
        ))
    if scores.education.details.gpa_match:
        strengths.append(Strength(
            category="education",
            description="Strong academic performance (GPA 3.0+)",
            impact="low",
        ))

    if additional.certifications > 0:
        strengths.append(Strength(
            category="additional",
            description=f"{additional.certifications} professional certification(s)",
            impact="medium",
        ))
    if additional.projects > 2:
        strengths.append(Strength(
            category="additional",
            description=f"Strong project portfolio with {additional.projects} projects",
            impact="medium",
        ))
    return strengths


def identify_gaps(scores: CategoryScores) -> list[GapEntry]:
    gaps: list[GapEntry] = []
    skills = scores.skills.details
    experience = scores.experience.details
    education = scores.education.details

    if skills.insufficient_data:
        gaps.append(GapEntry(
            category="skills",
            type="insufficient_skills_data",
            description="No specific skills listed in job posting - insufficient job data",
            severity="important",
            suggestion="Review the full posting and note the skills the role expects",
        ))
    if skills.missing:
        top = skills.missing[:3]
        gaps.append(GapEntry(
            category="skills",
            type="missing_skills",
            description=f"Missing skills: {', '.join(top)}",
            severity="critical" if scores.skills.score < 50 else "important",
            suggestion=f"Consider gaining experience in {top[0]} through courses or projects",
            skills=top,
        ))
    if skills.weak:
        top = [w.name for w in skills.weak[:3]]
        gaps.append(GapEntry(
            category="skills",
            type="weak_skills",
            description=f"Skills need strengthening: {', '.join(top)}",
            severity="important",
            suggestion=f"Advance from {skills.weak[0].user_level or 'Beginner'} to Intermediate level",
            skills=top,
        ))

    if experience.years_required > experience.years_experience:
        shortfall = round_half_up(experience.years_required - experience.years_experience, 1)
        gaps.append(GapEntry(
            category="experience",
            type="years",
            description=f"{shortfall:g} more years of experience recommended",
            severity="critical" if shortfall > 2 else "important",
            suggestion="Emphasize relevant project work and internships to demonstrate practical experience",
        ))
    if not experience.relevant_positions:
        gaps.append(GapEntry(
            category="experience",
            type="relevant_positions",
            description="No directly relevant previous positions",
            severity="important",
            suggestion="Highlight transferable skills and related project experience",
        ))

    if not education.has_required_degree:
        gaps.append(GapEntry(
            category="education",
            type="degree",
            description=f"{education.required_degree} degree requirement not met",
            severity="critical",
            suggestion="Consider pursuing the required degree or highlighting equivalent experience",
        ))
    if education.required_field and not education.field_match:
        gaps.append(GapEntry(
            category="education",
            type="field",
            description=f"Field of study doesn't match job requirements ({education.required_field})",
            severity="minor",
            suggestion="Obtain relevant certifications or complete specialized coursework",
        ))

    if not scores.additional.details.location_match:
        gaps.append(GapEntry(
            category="additional",
            type="location",
            description="Location doesn't match job requirements",
            severity="minor",
            suggestion="Be prepared to relocate or address location in cover letter",
        ))
    return gaps


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------

def _course_resources(skill: str, catalog: SkillCatalog) -> list[SuggestionResource]:
    resources = []
    for platform in SUGGESTION_PLATFORMS:
        base_url = catalog.learning_platforms.get(platform)
        if base_url:
            resources.append(SuggestionResource(
                title=f"{skill} courses on {platform}",
                url=platform_url(base_url, skill),
                platform=platform,
            ))
    return resources


def generate_suggestions(
    gaps: list[GapEntry],
    profile: UserProfile,
    catalog: SkillCatalog | None = None,
    limit: int | None = None,
) -> list[Suggestion]:
    """Turn gaps into ranked suggestions: priority, then estimated impact."""
    catalog = resolve_catalog(catalog)
    suggestions: list[Suggestion] = []

    for gap in gaps:
        if gap.type == "missing_skills" and gap.severity == "critical":
            for skill in gap.skills[:2]:
                suggestions.append(Suggestion(
                    type="skill",
                    priority="high",
                    title=f"Learn {skill}",
                    description=f"{skill} is a critical skill for this position. Focus on this first.",
                    estimated_impact=10,
                    resources=_course_resources(skill, catalog),
                ))
        elif gap.type == "weak_skills":
            title, url, platform = PRACTICE_RESOURCE
            suggestions.append(Suggestion(
                type="skill",
                priority="medium",
                title="Strengthen Existing Skills",
                description=(
                    "Move from Beginner to Intermediate level in your weak skills "
                    "through practice and projects"
                ),
                estimated_impact=6,
                resources=[SuggestionResource(title=title, url=url, platform=platform)],
            ))
        elif gap.category == "experience" and gap.severity == "critical":
            suggestions.append(Suggestion(
                type="experience",
                priority="medium",
                title="Gain Relevant Experience",
                description=(
                    "Consider internships, freelance projects, or open-source "
                    "contributions to build experience"
                ),
                estimated_impact=8,
            ))
        elif gap.category == "education":
            critical = gap.severity == "critical"
            suggestions.append(Suggestion(
                type="education",
                priority="high" if critical else "low",
                title="Educational Enhancement",
                description=gap.suggestion,
                estimated_impact=10 if critical else 4,
            ))

    if len(profile.headline) < MIN_HEADLINE_LENGTH:
        suggestions.append(Suggestion(
            type="profile",
            priority="low",
            title="Complete Your Profile",
            description="Add a compelling headline that highlights your key skills and experience",
            estimated_impact=3,
        ))
    if len(profile.projects) < MIN_PROJECTS:
        suggestions.append(Suggestion(
            type="profile",
            priority="medium",
            title="Build Your Portfolio",
            description="Add at least 2-3 relevant projects to demonstrate your skills",
            estimated_impact=5,
        ))

    suggestions.sort(key=lambda s: (PRIORITY_RANK[s.priority], s.estimated_impact), reverse=True)
    return suggestions[: limit or settings.max_suggestions]


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def calculate_job_match(
    job: JobPosting,
    profile: UserProfile,
    weights: WeightMap | None = None,
    catalog: SkillCatalog | None = None,
    today: date | None = None,
) -> MatchResult:
    """Full match analysis of *profile* against *job*.

    Deterministic for identical inputs apart from metadata.calculated_at.
    """
    catalog = resolve_catalog(catalog)
    applied = weights or default_weights()

    scores = CategoryScores(
        skills=calculate_skills_score(job, profile, catalog),
        experience=calculate_experience_score(job, profile, today),
        education=calculate_education_score(job, profile),
        additional=calculate_additional_score(job, profile, today),
    )
    scores.skills.weight = applied.skills
    scores.experience.weight = applied.experience
    scores.education.weight = applied.education
    scores.additional.weight = applied.additional

    overall = compute_overall_score(scores, applied)
    gaps = identify_gaps(scores)

    result = MatchResult(
        job_id=job.id,
        overall_score=overall,
        category_scores=scores,
        strengths=identify_strengths(scores),
        gaps=gaps,
        suggestions=generate_suggestions(gaps, profile, catalog),
        custom_weights=weights,
        metadata=MatchMetadata(
            job_title=job.title,
            company=job.company,
            industry=job.industry,
            calculated_at=datetime.now(timezone.utc),
            algorithm_version=ALGORITHM_VERSION,
        ),
    )
    logger.debug(
        "Match for job %s: overall=%d skills=%d experience=%d education=%d additional=%d",
        job.id or job.title, overall, scores.skills.score, scores.experience.score,
        scores.education.score, scores.additional.score,
    )
    return result

"""Education category: degree level, field of study and GPA."""

import logging
import re

from models.schemas.job_posting import JobPosting
from models.schemas.match_result import EducationDetails, EducationScore
from models.schemas.user_profile import Education, UserProfile

logger = logging.getLogger(__name__)

BASE_SCORE = 50
DEGREE_POINTS = 30
FIELD_POINTS = 30
DEGREE_PENALTY = 20
NO_EDUCATION_SCORE = 40  # many postings don't gate on education

DEGREE_LEVELS: dict[str, int] = {
    "None": 0,
    "High School": 1,
    "Associate": 2,
    "Bachelor": 3,
    "Master": 4,
    "PhD": 5,
}

# Posting wording -> required degree, strongest first
_DEGREE_REQUIREMENT_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("PhD", re.compile(r"\bph\.?\s?d\b|\bdoctorate\b|\bdoctoral\b")),
    ("Master", re.compile(r"(?<!scrum )(?<!scrum-)\bmaster'?s?\b|\bmba\b|\bm\.?s\.?\s+(?:degree|in)\b")),
    ("Bachelor", re.compile(r"\bbachelor'?s?\b|\bb\.?[as]\.?\s+(?:degree|in)\b")),
    ("Associate", re.compile(r"\bassociate'?s?\s+degree\b")),
)

# Degree as written on a profile -> level
_PROFILE_DEGREE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("PhD", re.compile(r"ph\.?\s?d|doctor")),
    ("Master", re.compile(r"master|mba|\bm\.?s\.?c?\b|\bm\.?eng\b|\bm\.?a\.?\b")),
    ("Bachelor", re.compile(r"bachelor|\bb\.?s\.?c?\b|\bb\.?a\.?\b|\bb\.?eng\b|\bb\.?tech\b")),
    ("Associate", re.compile(r"associate")),
)

FIELDS_OF_STUDY: tuple[str, ...] = (
    "computer science", "engineering", "software", "information technology",
    "mathematics", "physics", "business", "finance", "marketing", "healthcare",
    "education", "design", "data science", "artificial intelligence",
)

GPA_TIERS: tuple[tuple[float, int], ...] = ((3.7, 20), (3.5, 15), (3.0, 10))


def _job_text(job: JobPosting) -> str:
    return f"{job.description} {' '.join(job.requirements)}".lower()


def extract_degree_requirement(job: JobPosting) -> str:
    """Highest degree named by the posting, or "None"."""
    text = _job_text(job)
    for degree, pattern in _DEGREE_REQUIREMENT_PATTERNS:
        if pattern.search(text):
            return degree
    return "None"


def extract_field_requirement(job: JobPosting) -> str | None:
    """First known field of study mentioned by the posting."""
    text = _job_text(job)
    for field in FIELDS_OF_STUDY:
        if field in text:
            return field
    return None


def get_education_level(degree: str) -> int:
    """Level of a profile degree; anything unrecognised counts as high school."""
    degree_lower = degree.lower()
    for name, pattern in _PROFILE_DEGREE_PATTERNS:
        if pattern.search(degree_lower):
            return DEGREE_LEVELS[name]
    return DEGREE_LEVELS["High School"]


def level_name(level: int) -> str:
    for name, value in DEGREE_LEVELS.items():
        if value == level:
            return name
    return "None"


def highest_public_gpa(education: list[Education]) -> float | None:
    gpas = [e.gpa for e in education if e.gpa is not None and not e.gpa_private]
    return max(gpas) if gpas else None


def gpa_bonus(gpa: float | None) -> int:
    if gpa is None:
        return 0
    for threshold, points in GPA_TIERS:
        if gpa >= threshold:
            return points
    return 0


def calculate_education_score(job: JobPosting, profile: UserProfile) -> EducationScore:
    """Score 0-100 for education fit. An empty education list scores 40."""
    required_degree = extract_degree_requirement(job)
    required_field = extract_field_requirement(job)
    required_level = DEGREE_LEVELS[required_degree]
    education = profile.education

    if not education:
        return EducationScore(
            score=NO_EDUCATION_SCORE,
            details=EducationDetails(
                degree_match=required_level == 0,
                field_match=required_field is None,
                has_required_degree=required_level == 0,
                education_level="None",
                required_degree=required_degree,
                required_field=required_field,
            ),
        )

    education_level = max(get_education_level(e.degree) for e in education)
    degree_match = required_level == 0 or education_level >= required_level
    field_match = required_field is None or any(
        required_field in e.field_of_study.lower() for e in education
    )
    gpa = highest_public_gpa(education)
    bonus = gpa_bonus(gpa)

    score = BASE_SCORE
    if degree_match:
        score += DEGREE_POINTS
    else:
        score -= DEGREE_PENALTY
    if field_match:
        score += FIELD_POINTS
    score += bonus

    return EducationScore(
        score=max(0, min(100, score)),
        details=EducationDetails(
            degree_match=degree_match,
            field_match=field_match,
            gpa_match=bonus > 0,
            has_required_degree=degree_match,
            education_level=level_name(education_level),
            required_degree=required_degree,
            required_field=required_field,
        ),
    )

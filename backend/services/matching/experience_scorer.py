"""Experience category: tenure, relevant positions, industry and seniority."""

import logging
import re
from datetime import date

from models.schemas.job_posting import JobPosting
from models.schemas.match_result import ExperienceDetails, ExperienceScore, RelevantPosition
from models.schemas.user_profile import Employment, UserProfile
from services.numeric import round_half_up

logger = logging.getLogger(__name__)

BASE_SCORE = 50
YEARS_POINTS = 30
RELEVANCE_CAP = 40
RELEVANCE_POINTS = {"high": 15, "medium": 10, "low": 5}
INDUSTRY_BONUS = 15
SENIORITY_BONUS = 15
MIN_TENURE_MONTHS = 6

# Tried in order; the first pattern that matches wins
_YEARS_REQUIRED_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\+?\s*years?\s*(?:of)?\s*experience", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*years?\s*(?:in|with)", re.IGNORECASE),
    re.compile(r"minimum\s*(?:of)?\s*(\d+)\s*years?", re.IGNORECASE),
    re.compile(r"at\s+least\s*(\d+)\s*years?", re.IGNORECASE),
)

_STOP_WORDS = frozenset({"the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for"})

SENIORITY_LEVELS = ("entry", "mid", "senior", "lead", "executive")


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end, never negative."""
    return max(0, (end.year - start.year) * 12 + (end.month - start.month))


def employment_months(entry: Employment, today: date) -> int:
    # A missing end date on a past position is treated as ongoing
    end = today if entry.is_current_position or entry.end_date is None else entry.end_date
    return months_between(entry.start_date, end)


def calculate_total_years(employment: list[Employment], today: date | None = None) -> float:
    """Total years across all positions, one decimal."""
    today = today or date.today()
    total_months = sum(employment_months(e, today) for e in employment)
    return round_half_up(total_months / 12, 1)


def extract_years_required(job: JobPosting) -> int:
    """Years of experience the posting asks for; 0 when it doesn't say."""
    text = f"{job.description} {' '.join(job.requirements)}"
    for pattern in _YEARS_REQUIRED_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return 0


def extract_title_keywords(text: str) -> list[str]:
    """Distinct lower-case words longer than two characters, minus stop words."""
    words = [w for w in text.lower().split() if len(w) > 2 and w not in _STOP_WORDS]
    return list(dict.fromkeys(words))


def find_relevant_positions(
    job: JobPosting, employment: list[Employment], today: date | None = None
) -> list[RelevantPosition]:
    """Rate each position against the job title's keywords.

    Title hits count 2, description hits count 1; >=4 is high, >=2 medium.
    Low-relevance positions survive only with at least six months' tenure.
    """
    today = today or date.today()
    keywords = extract_title_keywords(job.title)
    positions: list[RelevantPosition] = []

    for entry in employment:
        title_lower = entry.position.lower()
        description_lower = entry.description.lower()
        match_score = 0
        for keyword in keywords:
            if keyword in title_lower:
                match_score += 2
            if keyword in description_lower:
                match_score += 1

        if match_score >= 4:
            relevance = "high"
        elif match_score >= 2:
            relevance = "medium"
        else:
            relevance = "low"

        duration = employment_months(entry, today)
        if relevance != "low" or duration >= MIN_TENURE_MONTHS:
            positions.append(RelevantPosition(
                title=entry.position,
                company=entry.company,
                duration=duration,
                relevance=relevance,
            ))
    return positions


def _seniority_from_title(title: str, include_entry: bool) -> str | None:
    title = title.lower()
    if any(k in title for k in ("chief", "vp", "director")):
        return "executive"
    if any(k in title for k in ("lead", "principal", "architect")):
        return "lead"
    if "senior" in title or "sr." in title:
        return "senior"
    if include_entry and any(k in title for k in ("junior", "jr.", "entry")):
        return "entry"
    return None


def _seniority_from_years(years: float) -> str:
    if years >= 8:
        return "senior"
    if years >= 4:
        return "mid"
    return "entry"


def determine_job_seniority(title: str, total_years: float) -> str:
    """Seniority the posting targets: title keywords, else the candidate's total years."""
    return _seniority_from_title(title, include_entry=True) or _seniority_from_years(total_years)


def determine_user_seniority(employment: list[Employment], total_years: float) -> str:
    """Seniority from the two most recent titles, else total years."""
    recent = sorted(employment, key=lambda e: e.start_date, reverse=True)[:2]
    for entry in recent:
        level = _seniority_from_title(entry.position, include_entry=False)
        if level:
            return level
    return _seniority_from_years(total_years)


def check_industry_match(job: JobPosting, employment: list[Employment]) -> bool:
    if not job.industry:
        return False
    industry = job.industry.lower()
    return any(
        (e.industry and e.industry.lower() == industry)
        or (e.company and e.company == job.company)
        for e in employment
    )


def calculate_experience_score(
    job: JobPosting, profile: UserProfile, today: date | None = None
) -> ExperienceScore:
    """Score 0-100 for experience fit. No employment history scores 0."""
    employment = profile.employment
    if not employment:
        return ExperienceScore(score=0, details=ExperienceDetails())

    today = today or date.today()
    total_years = calculate_total_years(employment, today)
    years_required = extract_years_required(job)
    relevant_positions = find_relevant_positions(job, employment, today)
    industry_match = check_industry_match(job, employment)

    job_seniority = determine_job_seniority(job.title, total_years)
    user_seniority = determine_user_seniority(employment, total_years)
    seniority_match = (
        SENIORITY_LEVELS.index(user_seniority) >= SENIORITY_LEVELS.index(job_seniority)
    )

    score = BASE_SCORE
    if years_required == 0 or total_years >= years_required:
        score += YEARS_POINTS
    else:
        score += round_half_up(YEARS_POINTS * min(1.0, total_years / years_required))

    if relevant_positions:
        score += min(
            RELEVANCE_CAP,
            sum(RELEVANCE_POINTS[p.relevance] for p in relevant_positions),
        )
    if industry_match:
        score += INDUSTRY_BONUS
    if seniority_match:
        score += SENIORITY_BONUS

    return ExperienceScore(
        score=min(100, score),
        details=ExperienceDetails(
            years_experience=total_years,
            years_required=years_required,
            relevant_positions=relevant_positions,
            industry_match=industry_match,
            seniority_match=seniority_match,
            job_seniority=job_seniority,
            user_seniority=user_seniority,
        ),
    )

"""Additional factors: location, work mode, salary, certifications, projects."""

import logging
from datetime import date

from models.schemas.job_posting import JobPosting, SalaryRange
from models.schemas.match_result import AdditionalDetails, AdditionalScore
from models.schemas.user_profile import UserProfile
from services.matching.experience_scorer import calculate_total_years

logger = logging.getLogger(__name__)

BASE_SCORE = 50
LOCATION_POINTS = 25
WORK_MODE_POINTS = 25
SALARY_POINTS = 20
CERT_POINTS, CERT_CAP = 5, 15
PROJECT_POINTS, PROJECT_CAP = 3, 15

# Heuristic salary floor: 40k plus 8k per year of experience
EXPECTED_SALARY_BASE = 40_000
EXPECTED_SALARY_PER_YEAR = 8_000
SALARY_TOLERANCE = 0.8


def _is_remote(work_mode: str) -> bool:
    return work_mode.strip().lower() == "remote"


def check_location_match(job_location: str, user_location: str, work_mode: str) -> bool:
    """Remote jobs and unconstrained jobs always match; else substring overlap."""
    if _is_remote(work_mode):
        return True
    if not job_location:
        return True
    if not user_location:
        return False
    job_loc = job_location.lower()
    user_loc = user_location.lower()
    return user_loc in job_loc or job_loc in user_loc


def check_work_mode_match(work_mode: str, user_location: str) -> bool:
    return not work_mode or _is_remote(work_mode) or bool(user_location)


def expected_minimum_salary(years: float) -> float:
    return EXPECTED_SALARY_BASE + EXPECTED_SALARY_PER_YEAR * years


def check_salary_match(salary: SalaryRange | None, years: float) -> bool:
    """False only when the advertised minimum is well under the expected floor."""
    if salary is None or salary.min is None:
        return True
    return salary.min >= expected_minimum_salary(years) * SALARY_TOLERANCE


def calculate_additional_score(
    job: JobPosting, profile: UserProfile, today: date | None = None
) -> AdditionalScore:
    location_match = check_location_match(job.location, profile.location, job.work_mode)
    work_mode_match = check_work_mode_match(job.work_mode, profile.location)
    years = calculate_total_years(profile.employment, today)
    salary_match = check_salary_match(job.salary, years)
    cert_count = len(profile.certifications)
    project_count = len(profile.projects)

    score = BASE_SCORE
    if location_match:
        score += LOCATION_POINTS
    if work_mode_match:
        score += WORK_MODE_POINTS
    if salary_match:
        score += SALARY_POINTS
    score += min(CERT_CAP, cert_count * CERT_POINTS)
    score += min(PROJECT_CAP, project_count * PROJECT_POINTS)

    return AdditionalScore(
        score=min(100, score),
        details=AdditionalDetails(
            location_match=location_match,
            work_mode_match=work_mode_match,
            salary_expectation_match=salary_match,
            certifications=cert_count,
            projects=project_count,
        ),
    )

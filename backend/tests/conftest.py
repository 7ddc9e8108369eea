"""Shared test configuration, pytest markers and fixtures."""

from datetime import date, datetime, timezone

import pytest

from models.schemas.job_posting import JobPosting
from models.schemas.match_result import (
    AdditionalScore,
    CategoryScores,
    EducationScore,
    ExperienceScore,
    MatchMetadata,
    MatchResult,
    SkillsScore,
)
from models.schemas.user_profile import (
    Certification,
    Education,
    Employment,
    Project,
    UserProfile,
    UserSkill,
)

TODAY = date(2024, 6, 1)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def backend_job() -> JobPosting:
    return JobPosting(
        id="job-1",
        title="Backend Engineer",
        company="Acme",
        description="Build APIs for our payments platform.",
        requirements=[
            "3+ years of experience with Python",
            "Docker required",
            "Kubernetes is a plus",
            "Bachelor's degree in Computer Science",
        ],
        industry="Fintech",
        location="Berlin",
        work_mode="Hybrid",
    )


@pytest.fixture
def backend_profile() -> UserProfile:
    return UserProfile(
        headline="Backend engineer focused on payment systems",
        skills=[
            UserSkill(name="Python", level="Expert", category="Technical"),
            UserSkill(name="Docker", level="Beginner", category="Cloud"),
        ],
        employment=[
            Employment(
                position="Backend Engineer",
                company="Paywise",
                description="Built backend services for card payments",
                industry="Fintech",
                start_date=date(2019, 6, 1),
                is_current_position=True,
            ),
        ],
        education=[
            Education(
                institution="TU Berlin",
                degree="Bachelor of Science",
                field_of_study="Computer Science",
                gpa=3.6,
            ),
        ],
        projects=[Project(name="Ledger"), Project(name="Rate Limiter")],
        certifications=[Certification(name="CKA", issuer="CNCF")],
        location="Berlin, Germany",
    )


@pytest.fixture
def make_match():
    """Factory for MatchResult objects with chosen scores."""

    def _make(
        overall: int,
        job_id: str | None = None,
        title: str = "Engineer",
        company: str = "Acme",
        skills: int = 50,
        experience: int = 50,
        education: int = 50,
        additional: int = 50,
        calculated_at: datetime | None = None,
    ) -> MatchResult:
        return MatchResult(
            job_id=job_id,
            overall_score=overall,
            category_scores=CategoryScores(
                skills=SkillsScore(score=skills, weight=40),
                experience=ExperienceScore(score=experience, weight=30),
                education=EducationScore(score=education, weight=15),
                additional=AdditionalScore(score=additional, weight=15),
            ),
            metadata=MatchMetadata(
                job_title=title,
                company=company,
                calculated_at=calculated_at or datetime(2024, 6, 1, tzinfo=timezone.utc),
            ),
        )

    return _make

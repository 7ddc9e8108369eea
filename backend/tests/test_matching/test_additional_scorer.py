"""Tests for location, work mode, salary and portfolio factors."""

from datetime import date

from models.schemas.job_posting import JobPosting, SalaryRange
from models.schemas.user_profile import Certification, Employment, Project, UserProfile
from services.matching.additional_scorer import (
    calculate_additional_score,
    check_location_match,
    check_salary_match,
    check_work_mode_match,
    expected_minimum_salary,
)

TODAY = date(2024, 6, 1)


class TestLocation:
    def test_remote_always_matches(self):
        assert check_location_match("Berlin", "Lisbon", "Remote") is True

    def test_unconstrained_job(self):
        assert check_location_match("", "", "Onsite") is True

    def test_user_without_location(self):
        assert check_location_match("Berlin", "", "Onsite") is False

    def test_substring_overlap_either_way(self):
        assert check_location_match("Berlin", "Berlin, Germany", "Hybrid") is True
        assert check_location_match("Berlin, Germany", "berlin", "Hybrid") is True
        assert check_location_match("Berlin", "Munich", "Hybrid") is False


class TestWorkMode:
    def test_work_mode(self):
        assert check_work_mode_match("", "") is True
        assert check_work_mode_match("Remote", "") is True
        assert check_work_mode_match("Onsite", "Berlin") is True
        assert check_work_mode_match("Onsite", "") is False


class TestSalary:
    def test_expected_minimum(self):
        assert expected_minimum_salary(0) == 40_000
        assert expected_minimum_salary(5) == 80_000

    def test_no_salary_info_matches(self):
        assert check_salary_match(None, 10) is True
        assert check_salary_match(SalaryRange(max=90_000), 10) is True

    def test_tolerance(self):
        assert check_salary_match(SalaryRange(min=64_000), 5) is True
        assert check_salary_match(SalaryRange(min=50_000), 5) is False


class TestAdditionalScore:
    def test_capped_at_100(self):
        job = JobPosting(location="Berlin", work_mode="Hybrid")
        profile = UserProfile(
            location="Berlin",
            certifications=[Certification(name="CKA")] * 4,
            projects=[Project(name="p")] * 6,
        )
        result = calculate_additional_score(job, profile, TODAY)
        assert result.score == 100
        assert result.details.certifications == 4
        assert result.details.projects == 6

    def test_mismatches(self):
        job = JobPosting(location="Berlin", work_mode="Onsite", salary=SalaryRange(min=10_000))
        profile = UserProfile(
            certifications=[Certification(name="CKA")],
            projects=[Project(name="a"), Project(name="b")],
        )

        result = calculate_additional_score(job, profile, TODAY)

        # 50 base + 5 for one certification + 6 for two projects
        assert result.score == 61
        assert result.details.location_match is False
        assert result.details.work_mode_match is False
        assert result.details.salary_expectation_match is False

    def test_salary_floor_uses_experience(self):
        job = JobPosting(salary=SalaryRange(min=60_000))
        junior = UserProfile(employment=[
            Employment(start_date=date(2023, 6, 1), is_current_position=True),
        ])
        senior = UserProfile(employment=[
            Employment(start_date=date(2014, 6, 1), is_current_position=True),
        ])
        assert calculate_additional_score(job, junior, TODAY).details.salary_expectation_match is True
        assert calculate_additional_score(job, senior, TODAY).details.salary_expectation_match is False

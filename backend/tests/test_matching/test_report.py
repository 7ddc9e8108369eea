"""Tests for match history trends and text reports."""

from datetime import datetime, timezone

from models.schemas.job_posting import JobPosting
from models.schemas.match_result import GapEntry, Strength, Suggestion
from services.matching.report import render_match_report, summarize_match_history


def _at(day):
    return datetime(2024, 6, day, tzinfo=timezone.utc)


class TestMatchHistory:
    def test_improving_sorted_by_time(self, make_match):
        matches = [
            make_match(70, calculated_at=_at(3)),
            make_match(55, calculated_at=_at(1)),
            make_match(62, calculated_at=_at(2)),
        ]

        history = summarize_match_history(matches)

        assert history.trend.direction == "improving"
        assert history.trend.change == 15
        assert history.trend.first_score == 55
        assert history.trend.latest_score == 70
        assert [p.score for p in history.timeline] == [55, 62, 70]

    def test_declining(self, make_match):
        history = summarize_match_history([
            make_match(80, calculated_at=_at(1)),
            make_match(65, calculated_at=_at(2)),
        ])
        assert history.trend.direction == "declining"
        assert history.trend.change == 15

    def test_stable_single_match(self, make_match):
        history = summarize_match_history([make_match(64)])
        assert history.trend.direction == "stable"
        assert history.trend.change == 0
        assert len(history.timeline) == 1


class TestRenderMatchReport:
    def test_report_sections(self, make_match):
        match = make_match(72, title="Backend Engineer", company="Acme", skills=30)
        match.strengths = [Strength(category="skills", description="Key skills: Python", impact="medium")]
        match.gaps = [GapEntry(
            category="skills",
            description="Missing skills: Kubernetes",
            severity="critical",
            suggestion="Consider gaining experience in Kubernetes",
        )]
        match.suggestions = [Suggestion(
            type="skill", priority="high", title="Learn Kubernetes",
            description="Focus on this first.", estimated_impact=10,
        )]

        text = render_match_report(match, generated_at=_at(1))

        assert text.startswith("JOB MATCH ANALYSIS REPORT\n" + "=" * 50)
        assert "Job: Backend Engineer at Acme" in text
        assert "Generated: 2024-06-01" in text
        assert "OVERALL MATCH SCORE: 72% (Good)" in text
        assert "- Skills: 30%" in text
        assert "1. Key skills: Python (medium impact)" in text
        assert "1. [CRITICAL] Missing skills: Kubernetes" in text
        assert "   Suggestion: Consider gaining experience in Kubernetes" in text
        assert "1. [HIGH] Learn Kubernetes" in text
        assert "   Impact: +10 points" in text

    def test_job_overrides_metadata(self, make_match):
        match = make_match(40, title="Old Title", company="Old Co")
        job = JobPosting(title="Data Engineer", company="Initech")
        text = render_match_report(match, job, generated_at=_at(1))
        assert "Job: Data Engineer at Initech" in text
        assert "STRENGTHS:" not in text
        assert "(Poor)" in text

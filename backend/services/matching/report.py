"""Match history trends and plain-text match reports."""

from datetime import datetime, timezone

from models.schemas.comparison import HistoryTrend, MatchHistory, TimelinePoint
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult

REPORT_RULE = "=" * 50
REPORT_TOP_SUGGESTIONS = 5


def summarize_match_history(matches: list[MatchResult]) -> MatchHistory:
    """Trend of repeated matches for one job, oldest first by calculated_at."""
    if not matches:
        return MatchHistory()

    ordered = sorted(matches, key=lambda m: m.metadata.calculated_at)
    first, latest = ordered[0].overall_score, ordered[-1].overall_score
    change = latest - first
    if change > 0:
        direction = "improving"
    elif change < 0:
        direction = "declining"
    else:
        direction = "stable"

    return MatchHistory(
        trend=HistoryTrend(
            direction=direction,
            change=abs(change),
            first_score=first,
            latest_score=latest,
        ),
        timeline=[
            TimelinePoint(
                date=m.metadata.calculated_at,
                score=m.overall_score,
                skills=m.category_scores.skills.score,
                experience=m.category_scores.experience.score,
                education=m.category_scores.education.score,
                additional=m.category_scores.additional.score,
            )
            for m in ordered
        ],
    )


def render_match_report(
    match: MatchResult,
    job: JobPosting | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Human-readable text report of a match."""
    generated_at = generated_at or datetime.now(timezone.utc)
    title = job.title if job else match.metadata.job_title
    company = job.company if job else match.metadata.company
    scores = match.category_scores

    lines = [
        "JOB MATCH ANALYSIS REPORT",
        REPORT_RULE,
        "",
        f"Job: {title} at {company}",
        f"Generated: {generated_at:%Y-%m-%d}",
        "",
        f"OVERALL MATCH SCORE: {match.overall_score}% ({match.match_grade})",
        "",
        "CATEGORY BREAKDOWN:",
        f"- Skills: {scores.skills.score}%",
        f"- Experience: {scores.experience.score}%",
        f"- Education: {scores.education.score}%",
        f"- Additional: {scores.additional.score}%",
        "",
    ]

    if match.strengths:
        lines.append("STRENGTHS:")
        lines.extend(
            f"{i}. {s.description} ({s.impact} impact)"
            for i, s in enumerate(match.strengths, start=1)
        )
        lines.append("")

    if match.gaps:
        lines.append("GAPS TO ADDRESS:")
        for i, gap in enumerate(match.gaps, start=1):
            lines.append(f"{i}. [{gap.severity.upper()}] {gap.description}")
            lines.append(f"   Suggestion: {gap.suggestion}")
        lines.append("")

    if match.suggestions:
        lines.append("IMPROVEMENT SUGGESTIONS:")
        for i, s in enumerate(match.suggestions[:REPORT_TOP_SUGGESTIONS], start=1):
            lines.append(f"{i}. [{s.priority.upper()}] {s.title}")
            lines.append(f"   {s.description}")
            lines.append(f"   Impact: +{s.estimated_impact} points")

    return "\n".join(lines) + "\n"

"""Compare computed matches across jobs."""

import logging

import numpy as np

from models.schemas.comparison import (
    Comparison,
    ComparisonRecommendation,
    MatchSummary,
    ScoreDistribution,
)
from models.schemas.match_result import MatchResult
from services.numeric import round_half_up

logger = logging.getLogger(__name__)

PRIORITIZE_THRESHOLD = 75
LOW_AVERAGE_THRESHOLD = 60
WEAK_SKILLS_THRESHOLD = 50

# Bucket edges: poor [0,55) fair [55,70) good [70,85) excellent [85,100]
_DISTRIBUTION_EDGES = [0, 55, 70, 85, 101]


def _summary(match: MatchResult) -> MatchSummary:
    return MatchSummary(
        job=f"{match.metadata.job_title} at {match.metadata.company}",
        score=match.overall_score,
        id=match.job_id,
    )


def score_distribution(scores: list[int]) -> ScoreDistribution:
    if not scores:
        return ScoreDistribution()
    poor, fair, good, excellent = np.histogram(scores, bins=_DISTRIBUTION_EDGES)[0]
    return ScoreDistribution(
        excellent=int(excellent), good=int(good), fair=int(fair), poor=int(poor)
    )


def compare_job_matches(matches: list[MatchResult]) -> Comparison:
    """Rank matches and summarise them. An empty list yields the empty state."""
    if not matches:
        return Comparison()

    # sorted() is stable: ties keep input order
    ranked = sorted(matches, key=lambda m: m.overall_score, reverse=True)
    best, worst = ranked[0], ranked[-1]
    scores = [m.overall_score for m in matches]
    average = round_half_up(float(np.mean(scores)))

    recommendations: list[ComparisonRecommendation] = []
    if best.overall_score >= PRIORITIZE_THRESHOLD:
        recommendations.append(ComparisonRecommendation(
            type="action",
            message=(
                f"{best.metadata.job_title} at {best.metadata.company} is your best match "
                f"({best.overall_score}%). Prioritize this application."
            ),
        ))
    if average < LOW_AVERAGE_THRESHOLD:
        recommendations.append(ComparisonRecommendation(
            type="warning",
            message=(
                f"Your average match score is {average}%. "
                "Consider broadening your search or improving your skills."
            ),
        ))
    weak_skill_jobs = sum(
        1 for m in matches if m.category_scores.skills.score < WEAK_SKILLS_THRESHOLD
    )
    if weak_skill_jobs > len(matches) / 2:
        recommendations.append(ComparisonRecommendation(
            type="improvement",
            message="Many jobs show low skill matches. Focus on developing key skills in demand.",
        ))

    logger.info(
        "Compared %d matches: average %d, best %s (%d)",
        len(matches), average, best.job_id or best.metadata.job_title, best.overall_score,
    )
    return Comparison(
        total_jobs=len(matches),
        average_score=average,
        best_match=_summary(best),
        worst_match=_summary(worst),
        recommendations=recommendations,
        score_distribution=score_distribution(scores),
    )

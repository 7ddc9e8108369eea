"""Skill extraction and skill-gap analysis outputs."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

Importance = Literal["required", "preferred", "nice-to-have"]
SkillSource = Literal["requirements", "description", "title"]


class SkillRecord(BaseModel):
    """A skill extracted from a job posting."""
    name: str
    importance: Importance = "required"
    source: SkillSource = "requirements"


class GapSkill(SkillRecord):
    """A job skill after comparison against the user's skills.

    `gap` is empty for matched skills; `priority` is 0 for matched skills.
    """
    user_level: str = ""
    user_category: str = ""
    gap: Literal["", "weak", "missing"] = ""
    priority: float = 0.0


class GapSummary(BaseModel):
    matched: int = 0
    weak: int = 0
    missing: int = 0


class SkillGapAnalysis(BaseModel):
    """Partition of a job's skills into matched / weak / missing."""
    matched: list[GapSkill] = []
    weak: list[GapSkill] = []
    missing: list[GapSkill] = []
    match_percentage: int = 0  # 0-100
    total_required: int = 0
    summary: GapSummary = GapSummary()


class LearningResource(BaseModel):
    platform: str = ""
    title: str
    url: str
    type: str = "course"  # course, documentation


class SkillResources(BaseModel):
    """Learning links for one gap skill."""
    skill: str
    importance: Importance = "required"
    priority: float = 0.0
    resources: list[LearningResource] = []


class PhaseRecommendation(BaseModel):
    phase: Literal["foundation", "intermediate", "advanced"]
    title: str
    description: str
    skills: list[str] = []
    priority: Literal["high", "medium", "low"] = "medium"


class LearningPhases(BaseModel):
    foundation: list[GapSkill] = []
    intermediate: list[GapSkill] = []
    advanced: list[GapSkill] = []


class LearningDuration(BaseModel):
    hours: int = 0
    weeks: int = 0
    breakdown: dict[str, int] = {}  # hours per phase


class LearningPath(BaseModel):
    phases: LearningPhases = LearningPhases()
    estimated_duration: LearningDuration = LearningDuration()
    recommendations: list[PhaseRecommendation] = []


class JobSummary(BaseModel):
    id: str | None = None
    title: str = ""
    company: str = ""


class SkillGapReport(BaseModel):
    """Single-job skill gap analysis with learning resources and path."""
    job: JobSummary
    analysis: SkillGapAnalysis
    learning_resources: list[SkillResources] = []
    learning_path: LearningPath = LearningPath()
    analyzed_at: datetime

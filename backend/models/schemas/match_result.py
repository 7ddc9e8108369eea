"""Job match result: category scores, strengths, gaps and suggestions."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, computed_field

Severity = Literal["critical", "important", "minor"]
Priority = Literal["high", "medium", "low"]


def grade_for_score(score: int) -> str:
    """Human-readable bucket for an overall score."""
    if score >= 85:
        return "Excellent"
    if score >= 70:
        return "Good"
    if score >= 55:
        return "Fair"
    return "Poor"


MAX_WEIGHT = 1_000_000


class WeightMap(BaseModel):
    """Category weights, each in (0, MAX_WEIGHT]; only their ratios matter."""
    skills: float = Field(default=40, gt=0, le=MAX_WEIGHT, allow_inf_nan=False)
    experience: float = Field(default=30, gt=0, le=MAX_WEIGHT, allow_inf_nan=False)
    education: float = Field(default=15, gt=0, le=MAX_WEIGHT, allow_inf_nan=False)
    additional: float = Field(default=15, gt=0, le=MAX_WEIGHT, allow_inf_nan=False)

    @property
    def total(self) -> float:
        return self.skills + self.experience + self.education + self.additional


# ---------------------------------------------------------------------------
# Per-category detail breakdowns
# ---------------------------------------------------------------------------

class WeakSkill(BaseModel):
    name: str
    user_level: str = ""
    required_level: str = "Intermediate+"


class SkillsDetails(BaseModel):
    matched: list[str] = []
    missing: list[str] = []  # ordered by gap priority, highest first
    weak: list[WeakSkill] = []
    matched_count: int = 0
    total_required: int = 0
    insufficient_data: bool = False  # job yielded no extractable skills


class RelevantPosition(BaseModel):
    title: str = ""
    company: str = ""
    duration: int = 0  # months
    relevance: Literal["high", "medium", "low"] = "low"


class ExperienceDetails(BaseModel):
    years_experience: float = 0.0
    years_required: int = 0
    relevant_positions: list[RelevantPosition] = []
    industry_match: bool = False
    seniority_match: bool = False
    job_seniority: str = ""
    user_seniority: str = ""


class EducationDetails(BaseModel):
    degree_match: bool = False
    field_match: bool = False
    gpa_match: bool = False
    has_required_degree: bool = False
    education_level: str = "None"
    required_degree: str = "None"
    required_field: str | None = None


class AdditionalDetails(BaseModel):
    location_match: bool = False
    work_mode_match: bool = False
    salary_expectation_match: bool = False
    certifications: int = 0
    projects: int = 0


class CategoryScore(BaseModel):
    """A 0-100 sub-score. Values outside the range are contract violations."""
    score: int = Field(default=0, ge=0, le=100)
    weight: float = 0.0


class SkillsScore(CategoryScore):
    details: SkillsDetails = SkillsDetails()


class ExperienceScore(CategoryScore):
    details: ExperienceDetails = ExperienceDetails()


class EducationScore(CategoryScore):
    details: EducationDetails = EducationDetails()


class AdditionalScore(CategoryScore):
    details: AdditionalDetails = AdditionalDetails()


class CategoryScores(BaseModel):
    skills: SkillsScore
    experience: ExperienceScore
    education: EducationScore
    additional: AdditionalScore


# ---------------------------------------------------------------------------
# Explanations
# ---------------------------------------------------------------------------

class Strength(BaseModel):
    category: str
    description: str
    impact: Priority = "medium"


class GapEntry(BaseModel):
    category: str
    type: str = ""  # missing_skills, weak_skills, years, degree, location, ...
    description: str
    severity: Severity = "minor"
    suggestion: str = ""
    skills: list[str] = []  # skills named by the gap, if any


class SuggestionResource(BaseModel):
    title: str
    url: str
    platform: str = ""


class Suggestion(BaseModel):
    type: str  # skill, experience, education, profile
    priority: Priority = "medium"
    title: str
    description: str = ""
    estimated_impact: int = Field(default=0, ge=0, le=10)
    resources: list[SuggestionResource] = []


class MatchMetadata(BaseModel):
    job_title: str = ""
    company: str = ""
    industry: str = ""
    calculated_at: datetime
    algorithm_version: str = "1.0"


class MatchResult(BaseModel):
    """Full match analysis of one profile against one job posting."""
    job_id: str | None = None
    overall_score: int = Field(default=0, ge=0, le=100)
    category_scores: CategoryScores
    strengths: list[Strength] = []
    gaps: list[GapEntry] = []
    suggestions: list[Suggestion] = []
    custom_weights: WeightMap | None = None
    metadata: MatchMetadata

    @computed_field  # type: ignore[prop-decorator]
    @property
    def match_grade(self) -> str:
        return grade_for_score(self.overall_score)

"""Candidate profile input record."""

from datetime import date

from pydantic import BaseModel, Field


class UserSkill(BaseModel):
    """A single skill on the profile."""
    name: str
    level: str = ""  # Beginner, Intermediate, Advanced, Expert
    category: str = ""  # Technical, Cloud, Soft Skills, ...


class Employment(BaseModel):
    """A single employment entry."""
    position: str = ""
    company: str = ""
    description: str = ""
    industry: str = ""
    start_date: date
    end_date: date | None = None
    is_current_position: bool = False


class Education(BaseModel):
    """A single education entry."""
    institution: str = ""
    degree: str = ""  # e.g. "Bachelor of Science", "Master", "PhD"
    field_of_study: str = ""
    gpa: float | None = Field(default=None, ge=0)
    gpa_private: bool = False
    graduation_date: date | None = None


class Project(BaseModel):
    """A single portfolio project."""
    name: str = ""
    description: str = ""
    technologies: list[str] = []


class Certification(BaseModel):
    name: str = ""
    issuer: str = ""


class UserProfile(BaseModel):
    """Everything the engine reads about a candidate.

    Owned by the external profile store; the engine never mutates it.
    """
    headline: str = ""
    skills: list[UserSkill] = []
    employment: list[Employment] = []
    education: list[Education] = []
    projects: list[Project] = []
    certifications: list[Certification] = []
    location: str = ""
    experience_level: str = ""

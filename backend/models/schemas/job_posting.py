"""Job posting input record."""

from pydantic import BaseModel


class SalaryRange(BaseModel):
    """Advertised salary band, in whole currency units per year."""
    min: float | None = None
    max: float | None = None


class JobPosting(BaseModel):
    """A job posting as supplied by the caller. Read-only to the engine."""
    id: str | None = None
    title: str = ""
    company: str = ""
    description: str = ""
    requirements: list[str] = []
    industry: str = ""
    location: str = ""
    salary: SalaryRange | None = None
    work_mode: str = ""  # Remote, Hybrid, Onsite

"""Skill extraction from job postings: dictionary lookup + phrase patterns.

Combines:
1. Dictionary matching against the catalog's known skill names
2. Phrase templates ("experience with X", "knowledge of X", ...) that capture
   multi-word skills, accepted only when they contain a dictionary skill
3. Importance inference from requirement wording
"""

import logging
import re

from models.schemas.job_posting import JobPosting
from models.schemas.skill_gap import Importance, SkillRecord, SkillSource
from services.skill_catalog import SkillCatalog, resolve_catalog

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Phrase templates. Longest template first so its capture wins.
# A phrase runs until punctuation; a "." only ends it when followed by
# whitespace or end of text, so "Node.js" survives.
# ---------------------------------------------------------------------------
_PHRASE_BODY = r"(?P<phrase>(?:[^,;:()\n.!?]|\.(?=\S))+)"

_PHRASE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(template + _PHRASE_BODY, re.IGNORECASE)
    for template in (
        r"\bmust have experience (?:with|in)\s+",
        r"\bexperience (?:with|in)\s+",
        r"\bknowledge of\s+",
        r"\bproficiency (?:in|with)\s+",
        r"\bfamiliarity with\s+",
        r"\bexpertise (?:in|with)\s+",
    )
)

_PHRASE_STOP_RE = re.compile(
    r"\s+(?:and|or|as well as|including|such as|is|are|to|for|preferred|required)\b.*$",
    re.IGNORECASE,
)
_LEADING_ARTICLE_RE = re.compile(r"^(?:a|an|the)\s+", re.IGNORECASE)
_TRAILING_GENERIC_RE = re.compile(
    r"(?:\s+(?:development|programming|skills?|technologies|frameworks?|tools?|"
    r"concepts|principles|environments?|experience))+$",
    re.IGNORECASE,
)
MAX_PHRASE_WORDS = 4

_PREFERRED_MARKERS = ("preferred", "nice to have", "plus")
_OPTIONAL_MARKERS = ("bonus", "optional")


def _skill_pattern(skill: str) -> re.Pattern[str]:
    """Whole-word pattern for a skill name.

    Boundaries are explicit character classes rather than \\b so names ending
    in symbols ("C++", "C#", ".NET") still match, and "java" never matches
    inside "javascript".
    """
    escaped = re.escape(skill.lower())
    return re.compile(rf"(?<![a-z0-9.#+]){escaped}(?![a-z0-9+#])")


def find_dictionary_skills(text: str, catalog: SkillCatalog | None = None) -> list[str]:
    """Return dictionary skills found in *text*, in dictionary order."""
    catalog = resolve_catalog(catalog)
    if not text:
        return []
    text_lower = text.lower()
    return [skill for skill in catalog.skills if _skill_pattern(skill).search(text_lower)]


def extract_skill_phrases(text: str) -> list[str]:
    """Capture candidate skill phrases from template sentences.

    Pure text processing: no dictionary involved. Returns trimmed candidate
    strings of at most MAX_PHRASE_WORDS words, deduplicated case-insensitively
    in order of appearance.
    """
    if not text:
        return []
    candidates: list[str] = []
    seen: set[str] = set()
    spans: list[tuple[int, int]] = []
    for pattern in _PHRASE_PATTERNS:
        for match in pattern.finditer(text):
            start = match.start("phrase")
            # "must have experience with X" and "experience with X" capture the same X
            if any(s <= start < e for s, e in spans):
                continue
            spans.append((start, match.end("phrase")))

            phrase = _PHRASE_STOP_RE.sub("", match.group("phrase").strip())
            phrase = _LEADING_ARTICLE_RE.sub("", phrase)
            phrase = _TRAILING_GENERIC_RE.sub("", phrase).strip()
            if not phrase or len(phrase.split()) > MAX_PHRASE_WORDS:
                continue
            key = phrase.lower()
            if key not in seen:
                seen.add(key)
                candidates.append(phrase)
    return candidates


def extract_skill_keywords(text: str, catalog: SkillCatalog | None = None) -> list[str]:
    """Dictionary skills plus accepted phrase skills found in *text*."""
    catalog = resolve_catalog(catalog)
    found = find_dictionary_skills(text, catalog)
    seen = {s.lower() for s in found}

    for phrase in extract_skill_phrases(text):
        if phrase.lower() in seen:
            continue
        # Only keep phrases anchored on a known skill
        if find_dictionary_skills(phrase, catalog):
            seen.add(phrase.lower())
            found.append(phrase)
    return found


def infer_requirement_importance(line: str) -> Importance:
    """Importance of skills on a requirement line from its wording."""
    line_lower = line.lower()
    if any(marker in line_lower for marker in _PREFERRED_MARKERS):
        return "preferred"
    if any(marker in line_lower for marker in _OPTIONAL_MARKERS):
        return "nice-to-have"
    return "required"


def extract_job_skills(job: JobPosting, catalog: SkillCatalog | None = None) -> list[SkillRecord]:
    """Extract a deduplicated skill list from a job posting.

    Requirements are processed before the description, and the description
    before the title; the first occurrence of a name wins. A posting with no
    text yields an empty list.
    """
    catalog = resolve_catalog(catalog)
    skills: list[SkillRecord] = []
    seen: set[str] = set()

    def _add(names: list[str], importance: Importance, source: SkillSource) -> None:
        for name in names:
            key = name.lower()
            if key in seen:
                continue
            seen.add(key)
            skills.append(SkillRecord(name=name, importance=importance, source=source))

    for requirement in job.requirements:
        _add(
            extract_skill_keywords(requirement, catalog),
            infer_requirement_importance(requirement),
            "requirements",
        )

    if job.description:
        _add(extract_skill_keywords(job.description, catalog), "preferred", "description")

    if job.title:
        _add(extract_skill_keywords(job.title, catalog), "required", "title")

    logger.debug("Extracted %d skills from job %r", len(skills), job.title)
    return skills

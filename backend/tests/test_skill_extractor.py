"""Tests for dictionary + phrase skill extraction from job postings."""

from models.schemas.job_posting import JobPosting
from services.skill_catalog import SkillCatalog
from services.skill_extractor import (
    extract_job_skills,
    extract_skill_keywords,
    extract_skill_phrases,
    find_dictionary_skills,
    infer_requirement_importance,
)


class TestFindDictionarySkills:
    def test_returns_dictionary_order_and_casing(self):
        skills = find_dictionary_skills("proficient in typescript and javascript")
        assert skills == ["JavaScript", "TypeScript"]

    def test_java_not_in_javascript(self):
        skills = find_dictionary_skills("Proficient in JavaScript")
        assert "JavaScript" in skills
        assert "Java" not in skills

    def test_avoids_substring_false_positives(self):
        skills = find_dictionary_skills("Senior Software Engineer built scalable systems")
        assert "Scala" not in skills

    def test_dotted_names(self):
        skills = find_dictionary_skills("Built APIs with Node.js and Next.js")
        assert "Node.js" in skills
        assert "Next.js" in skills

    def test_symbol_names(self):
        skills = find_dictionary_skills("Services in C++ and C# on .NET")
        assert {"C++", "C#", ".NET"} <= set(skills)

    def test_empty_text(self):
        assert find_dictionary_skills("") == []

    def test_custom_catalog(self):
        catalog = SkillCatalog(skills=("Cobalt",))
        assert find_dictionary_skills("We ship Cobalt and Python", catalog) == ["Cobalt"]


class TestExtractSkillPhrases:
    def test_captures_template_phrases(self):
        phrases = extract_skill_phrases(
            "Experience with distributed systems, knowledge of the AWS ecosystem."
        )
        assert phrases == ["distributed systems", "AWS ecosystem"]

    def test_stops_at_conjunction(self):
        assert extract_skill_phrases("Experience with Kubernetes and Terraform") == ["Kubernetes"]

    def test_trims_generic_trailing_words(self):
        assert extract_skill_phrases("Proficiency in React development") == ["React"]

    def test_must_have_does_not_double_capture(self):
        assert extract_skill_phrases("Must have experience with GraphQL APIs") == ["GraphQL APIs"]

    def test_long_phrases_rejected(self):
        text = "Experience with building very large scale distributed backend systems"
        assert extract_skill_phrases(text) == []

    def test_dotted_name_survives(self):
        assert extract_skill_phrases("Expertise in Node.js. Remote friendly.") == ["Node.js"]


class TestExtractSkillKeywords:
    def test_keeps_phrase_anchored_on_dictionary_skill(self):
        assert extract_skill_keywords("Experience with AWS Lambda") == ["AWS", "AWS Lambda"]

    def test_drops_phrase_without_dictionary_skill(self):
        assert extract_skill_keywords("Experience with distributed systems") == []


class TestInferRequirementImportance:
    def test_required_by_default(self):
        assert infer_requirement_importance("Python required") == "required"
        assert infer_requirement_importance("Strong Python skills") == "required"

    def test_preferred_markers(self):
        assert infer_requirement_importance("Docker preferred") == "preferred"
        assert infer_requirement_importance("Kubernetes is a plus") == "preferred"
        assert infer_requirement_importance("GraphQL is nice to have") == "preferred"

    def test_optional_markers(self):
        assert infer_requirement_importance("Rust is a bonus") == "nice-to-have"
        assert infer_requirement_importance("Optional: Terraform") == "nice-to-have"


class TestExtractJobSkills:
    def test_requirement_lines(self):
        job = JobPosting(requirements=["JavaScript required", "React required"])
        skills = extract_job_skills(job)
        assert [s.name for s in skills] == ["JavaScript", "React"]
        assert all(s.importance == "required" for s in skills)
        assert all(s.source == "requirements" for s in skills)

    def test_first_occurrence_wins(self):
        job = JobPosting(
            title="Python Developer",
            description="We use Python and Docker daily.",
            requirements=["Python required"],
        )
        skills = extract_job_skills(job)
        assert [(s.name, s.importance, s.source) for s in skills] == [
            ("Python", "required", "requirements"),
            ("Docker", "preferred", "description"),
        ]

    def test_title_skills_are_required(self):
        skills = extract_job_skills(JobPosting(title="Kotlin Developer"))
        assert [(s.name, s.importance, s.source) for s in skills] == [
            ("Kotlin", "required", "title"),
        ]

    def test_no_duplicate_names(self):
        job = JobPosting(
            description="Python, python and PYTHON",
            requirements=["python required", "Python preferred"],
        )
        names = [s.name.lower() for s in extract_job_skills(job)]
        assert len(names) == len(set(names))

    def test_empty_job(self):
        assert extract_job_skills(JobPosting()) == []

"""Immutable lookup tables used by the matching engine.

The catalog is loaded once (built-in defaults, or a JSON file named by
SKILL_CATALOG_PATH) and passed into each component. Tests can construct a
smaller SkillCatalog and inject it directly.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Known skill vocabulary (display casing is preserved in extraction output)
# ---------------------------------------------------------------------------
SKILL_DICTIONARY: tuple[str, ...] = (
    # Programming languages
    "JavaScript", "Python", "Java", "C++", "C#", "Ruby", "PHP", "Swift", "Kotlin", "Go",
    "Rust", "TypeScript", "SQL", "R", "Scala", "Perl", "MATLAB", "Objective-C", "Dart",
    "Elixir", "Haskell", "Lua", "Clojure", "Groovy", "Julia", "F#", "COBOL", "Fortran",
    "Bash", "PowerShell", "Shell Scripting", "VBA", "Solidity",
    # Frontend
    "React", "Angular", "Vue", "Svelte", "Next.js", "Nuxt", "Gatsby", "Redux",
    "jQuery", "Bootstrap", "Tailwind", "HTML", "HTML5", "CSS", "CSS3", "Sass",
    "Webpack", "Vite", "Storybook", "Responsive Design", "Accessibility",
    # Backend & frameworks
    "Node.js", "Express", "NestJS", "Django", "Flask", "FastAPI", "Spring", "Spring Boot",
    "Hibernate", "Laravel", "Symfony", "Ruby on Rails", ".NET", "ASP.NET", "Blazor",
    "React Native", "Flutter", "Xamarin", "Ionic", "SwiftUI", "Android", "iOS",
    "REST API", "GraphQL", "gRPC", "WebSockets", "OAuth", "JWT", "SAML", "Microservices",
    "Serverless", "Event-Driven Architecture", "System Design", "Design Patterns",
    # Data & ML
    "TensorFlow", "PyTorch", "Keras", "scikit-learn", "Pandas", "NumPy", "SciPy",
    "Matplotlib", "Jupyter", "Spark", "Hadoop", "Airflow", "dbt", "Kafka", "Snowflake",
    "BigQuery", "Redshift", "Databricks", "ETL", "Data Warehousing", "Data Modeling",
    "Data Analysis", "Data Visualization", "Statistics", "Machine Learning",
    "Deep Learning", "Natural Language Processing", "Computer Vision",
    "Artificial Intelligence", "Generative AI", "LLM", "MLOps", "A/B Testing",
    # Databases
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "Cassandra", "Oracle",
    "Microsoft SQL Server", "SQLite", "DynamoDB", "Firebase", "Elasticsearch", "Neo4j",
    "MariaDB", "CouchDB", "Supabase", "NoSQL",
    # Cloud & DevOps
    "AWS", "Azure", "Google Cloud", "Heroku", "DigitalOcean", "Docker", "Kubernetes",
    "Helm", "OpenShift", "Jenkins", "GitLab CI", "GitHub Actions", "CircleCI",
    "Travis CI", "Terraform", "CloudFormation", "Ansible", "Chef", "Puppet", "Nginx",
    "Apache", "Linux", "Unix", "Prometheus", "Grafana", "Datadog", "Splunk", "ELK Stack",
    "Site Reliability Engineering", "Networking", "TCP/IP", "DNS", "Load Balancing",
    # Testing & QA
    "Jest", "Mocha", "Cypress", "Selenium", "Playwright", "pytest", "JUnit",
    "Unit Testing", "Integration Testing", "Test Automation", "Quality Assurance",
    # Tools & technologies
    "Git", "GitHub", "GitLab", "Bitbucket", "Jira", "Confluence", "Slack", "Trello",
    "Asana", "Postman", "Swagger", "Figma", "Sketch", "Adobe XD", "Photoshop",
    "Illustrator", "InDesign", "After Effects", "Premiere Pro", "PowerBI", "Power BI",
    "Tableau", "Looker", "Excel", "Google Analytics", "Salesforce", "HubSpot", "SAP",
    "Zendesk", "Shopify", "WordPress", "Unity", "Unreal Engine",
    # Methodologies
    "Agile", "Scrum", "Kanban", "Waterfall", "Lean", "Six Sigma", "DevOps", "CI/CD",
    "TDD", "BDD", "Pair Programming", "Code Review", "UI/UX", "User Research",
    "Wireframing", "Prototyping",
    # Security
    "Cybersecurity", "Penetration Testing", "OWASP", "Encryption", "Identity Management",
    "Network Security", "SIEM", "Incident Response", "Compliance", "GDPR", "HIPAA",
    "SOC 2",
    # Soft skills
    "Communication", "Leadership", "Problem Solving", "Critical Thinking", "Teamwork",
    "Time Management", "Adaptability", "Creativity", "Attention to Detail",
    "Project Management", "Stakeholder Management", "Mentoring", "Negotiation",
    "Public Speaking", "Presentation Skills", "Collaboration", "Customer Service",
    "Conflict Resolution", "Decision Making", "Strategic Planning",
    # Business & domain
    "Blockchain", "SEO", "SEM", "Digital Marketing", "Content Strategy",
    "Content Marketing", "Social Media Marketing", "Email Marketing", "Copywriting",
    "Financial Analysis", "Financial Modeling", "Accounting", "Budgeting", "Forecasting",
    "Risk Management", "Product Management", "Product Strategy", "Business Analysis",
    "Business Intelligence", "Market Research", "Sales", "Account Management",
    "Supply Chain Management", "Operations Management", "Change Management",
    "Vendor Management", "CRM", "ERP", "Technical Writing",
)

IMPORTANCE_WEIGHTS: dict[str, int] = {
    "required": 10,
    "preferred": 7,
    "nice-to-have": 4,
}

LEARNING_PLATFORMS: dict[str, str] = {
    "Coursera": "https://www.coursera.org/search?query=",
    "Udemy": "https://www.udemy.com/courses/search/?q=",
    "LinkedIn Learning": "https://www.linkedin.com/learning/search?keywords=",
    "Pluralsight": "https://www.pluralsight.com/search?q=",
    "edX": "https://www.edx.org/search?q=",
    "Udacity": "https://www.udacity.com/courses/all?search=",
}

# skill name -> (title, url)
OFFICIAL_DOCS: dict[str, tuple[str, str]] = {
    "JavaScript": ("MDN JavaScript Guide", "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Guide"),
    "Python": ("Python Official Documentation", "https://docs.python.org/3/"),
    "React": ("React Official Documentation", "https://react.dev/"),
    "Node.js": ("Node.js Documentation", "https://nodejs.org/docs/"),
    "TypeScript": ("TypeScript Handbook", "https://www.typescriptlang.org/docs/"),
    "Angular": ("Angular Documentation", "https://angular.io/docs"),
    "Vue": ("Vue.js Guide", "https://vuejs.org/guide/"),
    "Django": ("Django Documentation", "https://docs.djangoproject.com/"),
    "Flask": ("Flask Documentation", "https://flask.palletsprojects.com/"),
    "AWS": ("AWS Documentation", "https://docs.aws.amazon.com/"),
    "Docker": ("Docker Documentation", "https://docs.docker.com/"),
    "Kubernetes": ("Kubernetes Documentation", "https://kubernetes.io/docs/"),
}

# category -> member skills, used to place gaps on a learning path
SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Technical": ("JavaScript", "Python", "Java", "React", "Node.js", "SQL", "MongoDB"),
    "Cloud": ("AWS", "Azure", "Google Cloud", "Docker", "Kubernetes"),
    "Soft Skills": ("Communication", "Leadership", "Problem Solving", "Teamwork"),
}

DEFAULT_CATEGORY = "Technical"

# Canonical "practice" link for weak-skill suggestions
PRACTICE_RESOURCE: tuple[str, str, str] = (
    "Practice projects on GitHub",
    "https://github.com/topics/beginner-friendly",
    "GitHub",
)


class SkillCatalog(BaseModel):
    """Fixed lookup tables. Frozen so a shared instance can't drift."""
    model_config = ConfigDict(frozen=True)

    skills: tuple[str, ...] = SKILL_DICTIONARY
    importance_weights: dict[str, int] = IMPORTANCE_WEIGHTS
    learning_platforms: dict[str, str] = LEARNING_PLATFORMS
    official_docs: dict[str, tuple[str, str]] = OFFICIAL_DOCS
    skill_categories: dict[str, tuple[str, ...]] = SKILL_CATEGORIES
    default_category: str = DEFAULT_CATEGORY

    def importance_weight(self, importance: str) -> int:
        """Weight of an importance level; unknown levels weigh 5."""
        return self.importance_weights.get(importance, 5)

    def categorize(self, skill_name: str) -> str:
        """Category of a skill by two-way substring match on category members."""
        for category, members in self.skill_categories.items():
            if any(m in skill_name or skill_name in m for m in members):
                return category
        return self.default_category


def load_catalog(path: str | Path) -> SkillCatalog:
    """Load a catalog from a JSON file; omitted tables keep their defaults."""
    catalog = SkillCatalog.model_validate_json(Path(path).read_text(encoding="utf-8"))
    logger.info("Skill catalog loaded from %s (%d skills)", path, len(catalog.skills))
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> SkillCatalog:
    """The process-wide catalog, loaded once on first use."""
    if settings.skill_catalog_path:
        return load_catalog(settings.skill_catalog_path)
    return SkillCatalog()


def resolve_catalog(catalog: SkillCatalog | None) -> SkillCatalog:
    return catalog if catalog is not None else get_default_catalog()

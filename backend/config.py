import os
from pydantic import BaseModel
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class DefaultWeights(BaseModel):
    skills: float = 40
    experience: float = 30
    education: float = 15
    additional: float = 15


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Matching engine settings
    default_weights: DefaultWeights = DefaultWeights()
    max_suggestions: int = 10
    study_hours_per_week: int = 10
    skill_catalog_path: str = ""  # optional JSON file replacing the built-in catalog

    # Batch dispatcher
    batch_max_concurrency: int = 8

    rate_limit: str = "60/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_nested_delimiter": "__"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})

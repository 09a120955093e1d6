"""Configuration management for the categorization and matching service."""

from typing import Optional
from pydantic import ValidationError
from pydantic_settings import BaseSettings


REQUIRED_VARS = [
    "SUPABASE_URL",
    "SUPABASE_KEY",
]


class Config(BaseSettings):
    """Application configuration from environment variables."""

    # Required
    supabase_url: str
    supabase_key: str

    # Priority suggester (LLM fallback)
    anthropic_api_key: Optional[str] = None
    anthropic_model: str = "claude-3-5-sonnet-latest"
    llm_timeout_seconds: float = 30.0
    use_ai_fallback: bool = True

    # Matching
    match_config_path: Optional[str] = None

    # Backfill job
    backfill_interval_minutes: int = 60
    backfill_page_size: int = 25

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @property
    def ai_fallback_enabled(self) -> bool:
        """The fallback needs both the flag and a key."""
        return self.use_ai_fallback and bool(self.anthropic_api_key)


def validate_config() -> Config:
    """Build the Config, failing fast on missing credentials.

    Every missing required variable is named in one ValueError, so a
    fresh deployment can be fixed in a single pass.
    """
    try:
        return Config()  # type: ignore[call-arg]
    except ValidationError as exc:
        absent = {
            str(error["loc"][0]).upper()
            for error in exc.errors()
            if error["type"] == "missing" and error["loc"]
        }
        missing = [var for var in REQUIRED_VARS if var in absent]
        if not missing:
            raise
        raise ValueError(
            "Missing required environment variable(s): %s. "
            "Set them in the environment or in .env." % ", ".join(missing)
        ) from exc


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()

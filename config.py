"""Runtime configuration for the health promotion self-assessment app.

Values come from environment variables so the same code runs locally,
under `streamlit run` and in the test suite.
"""
import os
from dataclasses import dataclass
from functools import lru_cache


def _get_env(name: str, fallback: str = "") -> str:
    v = os.getenv(name)
    return (v or fallback).strip()


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    page_title: str

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    env = _get_env("HEALTH_SURVEY_ENV", "prod").lower()
    default_level = "DEBUG" if env == "dev" else "INFO"
    return Settings(
        env=env,
        log_level=_get_env("HEALTH_SURVEY_LOG_LEVEL", default_level).upper(),
        page_title=_get_env("HEALTH_SURVEY_PAGE_TITLE", "職場健康促進自我評估"),
    )

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env file sits in the project root (parent of src/)
# Only use if it exists (CI uses environment variables directly)
# Path: core/config.py -> lotbook -> src -> project root -> .env
_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"
_ENV_FILE = _ENV_FILE if _ENV_FILE.exists() else None


@lru_cache
def get_cache_dir() -> Path:
    """Get the cache directory (.cache/ in the project root).

    Looks for the project root by finding a .git directory or a
    pyproject.toml, then returns .cache/ within that root.
    """
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / ".git").exists() or (parent / "pyproject.toml").exists():
            cache_dir = parent / ".cache"
            cache_dir.mkdir(exist_ok=True)
            return cache_dir
    # Fallback to current working directory
    cache_dir = Path.cwd() / ".cache"
    cache_dir.mkdir(exist_ok=True)
    return cache_dir


# Breeds recognised in free-text lot notes ("30 nelore 20 anelorada")
DEFAULT_BREED_KEYWORDS = ("nelore", "anelorada", "cruzamento-industrial")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Display units for CLI output ("metric" = kg, "imperial" = lb)
    # Note: all analytics work in kg internally
    display_units: Literal["imperial", "metric"] = "metric"

    # Breeds recognised by the notes parser
    breed_keywords: list[str] = list(DEFAULT_BREED_KEYWORDS)

    # Number of transfers kept in the summary (non full-history) view
    transfer_summary_limit: int = 3

    # Width of weight distribution buckets (kg)
    weight_bucket_kg: int = 30

    # Label for lot/pasture ids that cannot be resolved
    unknown_label: str = "Unknown"

    # Snapshot file name inside the cache directory
    snapshot_file: str = "farm.json"


settings = Settings()

"""Settings for the convenience library.

Centralized configuration for the few knobs the helpers expose.
All settings are loaded from environment variables with the CONVENIENCE_ prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library configuration.

    All fields can be overridden by environment variables prefixed with
    ``CONVENIENCE_``.  For example, ``CONVENIENCE_DEFAULT_CULTURE=de-DE``
    makes the culture-aware conversions parse German number formats.
    """

    # ── Library identity ────────────────────────────────────────────
    LIBRARY_NAME: str = "convenience"
    LIBRARY_VERSION: str = "0.1.0"

    # ── Conversions ─────────────────────────────────────────────────
    DEFAULT_CULTURE: str = ""  # Empty = invariant culture

    # ── Sync bridge ─────────────────────────────────────────────────
    RUN_SYNC_MAX_WORKERS: int | None = None  # None = ThreadPoolExecutor default
    RUN_SYNC_THREAD_PREFIX: str = "convenience-run-sync"

    model_config = {
        "env_prefix": "CONVENIENCE_",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide ``Settings`` instance.

    Call ``get_settings.cache_clear()`` to pick up changed environment
    variables (tests do this).
    """
    return Settings()

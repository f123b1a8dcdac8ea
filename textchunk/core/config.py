"""Global configuration (12-factor style).

Environment variables read (all optional, see `.env.example`):

* ``TEXTCHUNK_CHUNK_SIZE``    - default: ``1000``
* ``TEXTCHUNK_CHUNK_OVERLAP`` - default: ``200``
* ``TEXTCHUNK_SEPARATORS``    - JSON list, default: ``["\\n\\n", "\\n", " ", ""]``
* ``TEXTCHUNK_LOG_LEVEL``     - default: ``"INFO"``

Usage:

    from textchunk.core.config import Settings
    settings = Settings()  # auto-loads & validates env vars
    policy = settings.to_policy()
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from textchunk.core.policy import DEFAULT_CHUNK_OVERLAP
from textchunk.core.policy import DEFAULT_CHUNK_SIZE
from textchunk.core.policy import SplitPolicy

DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", " ", "")


class Settings(BaseSettings):
    """Typed view over process environment."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTCHUNK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP
    separators: list[str] = Field(default_factory=lambda: list(DEFAULT_SEPARATORS))

    log_level: str = "INFO"

    def to_policy(self) -> SplitPolicy:
        """Build a validated :class:`SplitPolicy` from the configured sizes."""
        return SplitPolicy(chunk_size=self.chunk_size, chunk_overlap=self.chunk_overlap)

"""Settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the validation engine.

    Values are read from ``FIELDRULES_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDRULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Metadata key holding the annotation on each field
    tag_key: str = "validate"

    # Guards runaway nesting; kept below the interpreter recursion limit
    # (two frames per level). Deeper records are reported, not descended into.
    max_depth: int = Field(default=256, ge=1)

    # Report unrecognized rule names as invalid syntax instead of ignoring them
    strict_rules: bool = False

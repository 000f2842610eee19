"""
Runtime configuration loading for the envelope decoder.

Defaults come from `.env.example`; environment variables override them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, field_validator

from typed_envelope.models.envelope import EnvelopeKeys


class Settings(BaseModel):
    """Typed settings derived from .env.example with environment overrides."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    log_level: str = Field(alias="TYPED_ENVELOPE_LOG_LEVEL")
    status_key: str = Field(alias="ENVELOPE_STATUS_KEY")
    message_key: str = Field(alias="ENVELOPE_MESSAGE_KEY")
    details_key: str = Field(alias="ENVELOPE_DETAILS_KEY")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        normalized = str(value).strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"unknown log level: {value!r}")
        return normalized

    @field_validator("status_key", "message_key", "details_key", mode="before")
    @classmethod
    def strip_key(cls, value: str) -> str:
        return str(value).strip()

    def envelope_keys(self) -> EnvelopeKeys:
        return EnvelopeKeys(
            status=self.status_key,
            message=self.message_key,
            details=self.details_key,
        )


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load configuration using `.env.example` as the baseline."""

    if env_file is None:
        env_file = Path(__file__).resolve().parents[2] / ".env.example"
    defaults = dotenv_values(env_file) if env_file.exists() else {}

    # Environment variables override the example defaults.
    merged: dict[str, Optional[str]] = {**defaults, **dict(os.environ)}

    required = {
        "TYPED_ENVELOPE_LOG_LEVEL": "INFO",
        "ENVELOPE_STATUS_KEY": "status",
        "ENVELOPE_MESSAGE_KEY": "message",
        "ENVELOPE_DETAILS_KEY": "details",
    }
    for key, fallback in required.items():
        merged.setdefault(key, fallback)

    settings = Settings(**{key: merged[key] for key in required})

    keys = [settings.status_key, settings.message_key, settings.details_key]
    if any(not key for key in keys):
        raise RuntimeError("Envelope keys must not be blank.")
    if len(set(keys)) != len(keys):
        raise RuntimeError(f"Envelope keys must be distinct, got {keys}.")
    return settings


settings = load_settings()

"""Pydantic v2 models for TextBuddy configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SessionConfig(BaseModel):
    prompt: str = "command:"
    allowed_extensions: list[str] = Field(default_factory=lambda: [".txt"])
    encoding: str = "utf-8"
    show_welcome: bool = True


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    json_output: bool = False


class TextBuddyConfig(BaseModel):
    """Root configuration model for TextBuddy."""

    session: SessionConfig = Field(default_factory=SessionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

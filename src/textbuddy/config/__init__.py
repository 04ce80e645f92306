"""Configuration system for TextBuddy."""

from textbuddy.config.loader import load_config
from textbuddy.config.schema import TextBuddyConfig

__all__ = ["load_config", "TextBuddyConfig"]

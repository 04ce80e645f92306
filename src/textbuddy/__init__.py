"""TextBuddy - line-oriented text list editor."""

__version__ = "0.1.0"

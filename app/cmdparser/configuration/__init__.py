"""Configuration module - public API.

Centralized configuration for the command parser using Pydantic BaseSettings.

Exports:
    Settings: Main settings class
    ParserSettings: Parser settings class (for testing/overrides)
"""

from cmdparser.configuration.settings import ParserSettings, Settings

__all__ = ["Settings", "ParserSettings"]

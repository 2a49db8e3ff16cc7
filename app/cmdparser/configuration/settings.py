"""Command parser configuration settings - main aggregator."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cmdparser.configuration.base import FeatureSettings


class ParserSettings(FeatureSettings):
    """Configuration for command line parsing.

    Environment Variables:
        COMMAND_ARGUMENT_SEPARATOR: Literal character sequence separating
            arguments in the argument region. Defaults to ",".

    Example:
        ```python
        from cmdparser.services import get_settings

        settings = get_settings()
        separator = settings.parser.separator
        ```
    """

    separator: str = Field(
        default=",",
        alias="COMMAND_ARGUMENT_SEPARATOR",
        description="Separator between command arguments",
    )

    @field_validator("separator")
    @classmethod
    def _validate_separator(cls, v: str) -> str:
        """Reject an empty separator."""
        if not v:
            raise ValueError("COMMAND_ARGUMENT_SEPARATOR can't be an empty string")
        return v


class Settings(BaseSettings):
    """Command parser configuration settings.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from cmdparser.configuration import Settings

        settings = Settings()
        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    parser: ParserSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "parser": ParserSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

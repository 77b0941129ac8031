"""Settings for the Mood Palette service.

The service needs very little configuration: a Gemini credential, the model
to call, where uvicorn binds, which browser origins may call the API, and a
log level.  :class:`MoodPaletteConfig` reads all of it from the process
environment (``MOODPALETTE_`` prefix) or a local ``.env`` file.

Environment Variable Loading
-----------------------------
Values are resolved in this order:
1. Keyword arguments passed to ``MoodPaletteConfig(...)``
2. Environment variables (MOODPALETTE_* prefix)
3. .env file in the working directory
4. Default values defined in MoodPaletteConfig

Two settings also accept the bare names the deployment platform sets:
``GEMINI_API_KEY`` for the model credential and ``PORT`` for the server port.

Example .env file:
    GEMINI_API_KEY=your-key-here
    MOODPALETTE_MODEL_NAME=gemini-1.5-flash
    MOODPALETTE_SERVER_PORT=8080
    MOODPALETTE_ALLOWED_ORIGINS=http://localhost:3000,https://palette.example.com

Credential Requirement
----------------------
``gemini_api_key`` has no default.  Constructing ``MoodPaletteConfig``
without it (or with an empty value) raises :class:`pydantic.ValidationError`,
and :func:`moodpalette.api.main.main` refuses to start the server.

There is deliberately no module-level ``config`` instance: the application
factory receives an explicitly constructed config so that tests can build
their own.

Usage Example
-------------
    from moodpalette.core.config import MoodPaletteConfig

    config = MoodPaletteConfig()
    print(config.model_name)
    print(config.allowed_origins_list)
"""

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MoodPaletteConfig(BaseSettings):
    """Main configuration for the Mood Palette service.

    Attributes
    ----------
    Model Settings:
        gemini_api_key : SecretStr
            Google Gemini API key (required, never logged)
        model_name : str
            Gemini model used for palette generation
        request_timeout_ms : int | None
            HTTP timeout for a single model call in milliseconds.  ``None``
            leaves the call unbounded and relies on the caller's timeout.

    Server Settings:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Port for uvicorn (1-65535)
        allowed_origins : str
            Comma-separated CORS origins, ``*`` for any origin
        log_level : Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
            Root logging level; also passed to uvicorn

    Examples
    --------
        >>> cfg = MoodPaletteConfig(gemini_api_key="test-key", _env_file=None)
        >>> cfg.model_name
        'gemini-1.5-flash'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOODPALETTE_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Model settings
    gemini_api_key: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("GEMINI_API_KEY", "MOODPALETTE_GEMINI_API_KEY"),
        description="Google Gemini API key",
    )
    model_name: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model used to generate palettes",
    )
    request_timeout_ms: int | None = Field(
        default=None,
        ge=1,
        description="Model call timeout in milliseconds (unset = no timeout)",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=8080,
        validation_alias=AliasChoices("PORT", "MOODPALETTE_SERVER_PORT"),
        description="Server port",
        ge=1,
        le=65535,
    )
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of CORS origins",
    )
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Logging level (case-insensitive)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("gemini_api_key")
    @classmethod
    def _require_non_empty_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("GEMINI_API_KEY must not be empty")
        return value

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse allowed origins as list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

"""
Note Store: Application Configuration
=====================================

What:  Centralized configuration management using Pydantic Settings.
How:   Values come from keyword arguments (the command-line launcher passes
       them) or from NOTESTORE_* environment variables / a .env file.
       Host, port and cache directory have no defaults: constructing a
       Settings object without them raises pydantic.ValidationError.
Who:   Built once by `notestore.cli` and handed to `create_app(settings)`.
       There is no module-level singleton; the app keeps its own copy on
       `app.state.settings`.
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Static HTML form shipped with the package, served at /UploadForm.html
DEFAULT_UPLOAD_FORM = Path(__file__).resolve().parent / "static" / "UploadForm.html"


class Settings(BaseSettings):
    """
    Process-wide configuration, fixed at startup.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(description="Interface the HTTP listener binds to")
    port: int = Field(ge=1, le=65535, description="TCP port of the HTTP listener")

    # ── Note Storage ──────────────────────────────────────────────────────
    # What: Root directory; every note is one file directly inside it
    cache_dir: Path = Field(description="Directory holding one file per note")

    # What: Static HTML document served at GET /UploadForm.html
    upload_form_path: Path = Field(default=DEFAULT_UPLOAD_FORM)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, "*" allows every origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Rejects blank hosts (an empty flag is as good as a missing one)."""
        if not v.strip():
            raise ValueError("host must not be empty")
        return v.strip()

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_prefix="NOTESTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

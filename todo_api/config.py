"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - PORT and MONGO_URI are required; everything else has a default
    - load_settings() refuses to start without the .env file

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Missing file / invalid values surface as ConfigurationError so the entry point
      can log one fatal message and exit
"""

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todo_api.core.errors import ConfigurationError

DEFAULT_ENV_FILE = ".env"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE, case_sensitive=False, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(ge=1, le=65535)

    # MongoDB
    mongo_uri: str
    mongo_database: str = "resolution"
    mongo_collection: str = "todos"
    mongo_timeout_ms: int = 5000

    @field_validator("mongo_uri")
    @classmethod
    def require_mongo_scheme(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGO_URI must start with mongodb:// or mongodb+srv://")
        return v

    # API
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


def load_settings(env_file: str | Path = DEFAULT_ENV_FILE) -> Settings:
    """Load settings from the environment and env_file.

    Raises ConfigurationError if env_file is missing or a value is invalid.
    """
    path = Path(env_file)
    if not path.is_file():
        raise ConfigurationError(f"error in loading env file: {path}")
    try:
        return Settings(_env_file=path)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
        )
        raise ConfigurationError(f"invalid configuration: {fields}") from e

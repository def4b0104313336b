from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


def normalize_database_url(value: str) -> str:
    """
    Accept either a SQLAlchemy URL or an ADO-style connection string.

    "Data Source=invoice.db" -> "sqlite:///invoice.db"
    """
    raw = (value or "").strip()
    if "://" in raw:
        return raw

    parts = {}
    for chunk in raw.split(";"):
        if "=" not in chunk:
            continue
        key, _, val = chunk.partition("=")
        parts[key.strip().lower()] = val.strip()

    path = parts.get("data source") or parts.get("datasource") or parts.get("filename")
    if not path:
        raise ValueError(f"Unsupported connection string: {value!r}")
    return f"sqlite:///{path}"


class Settings(BaseSettings):

    """
    Application configuration.

    - Values come from environment variables first, then from .env.
    - The connection string honours ConnectionStrings__Default before DATABASE_URL.
    """

    # --------------------------------------------------
    # Database
    # --------------------------------------------------
    DATABASE_URL: str = Field(
        default="sqlite:///./invoice.db",
        validation_alias=AliasChoices("ConnectionStrings__Default", "DATABASE_URL"),
    )
    RUN_MIGRATIONS_ON_STARTUP: bool = True

    # --------------------------------------------------
    # API versioning
    # --------------------------------------------------
    API_DEFAULT_VERSION: str = "1.0"
    API_VERSION_HEADER: str = "X-Api-Version"
    API_VERSION_QUERY_PARAM: str = "api-version"

    # --------------------------------------------------
    # HTTP / logging
    # --------------------------------------------------
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"   # Ignore unrelated env vars (Docker / CI friendly)

    @field_validator("DATABASE_URL")
    @classmethod
    def _normalize_url(cls, v: str) -> str:
        return normalize_database_url(v)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()

# products_api/config.py

"""
Runtime settings for the Products API, read from environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_PORT = 4000


def _compose_postgres_url() -> str:
    # Read DB settings from environment variables, with defaults for local/dev
    user = os.getenv("POSTGRES_USER", "postgres")
    password = os.getenv("POSTGRES_PASSWORD", "postgres")
    db = os.getenv("POSTGRES_DB", "postgres")
    host = os.getenv("POSTGRES_HOST", "localhost")
    port = os.getenv("POSTGRES_PORT", "5432")

    # Compose the SQLAlchemy database URL, split for linting
    return (
        "postgresql://"
        f"{user}:{password}@"
        f"{host}:{port}/{db}"
    )


def parse_origins(raw: Optional[str]) -> List[str]:
    """Split a comma-separated FRONTEND_URL value into exact origins."""
    if not raw:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str
    allowed_origins: List[str] = field(default_factory=list)
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the process environment.
        DATABASE_URL wins over the individual POSTGRES_* variables.
        """
        return cls(
            database_url=os.getenv("DATABASE_URL") or _compose_postgres_url(),
            allowed_origins=parse_origins(os.getenv("FRONTEND_URL")),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

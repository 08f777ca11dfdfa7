"""
Configuration
=============
Loads settings from environment variables, reading a .env file first via
python-dotenv.

Environment Variables:
    BUGTRACKER_DATABASE_URL  : SQLAlchemy URL of the bug store (default: sqlite:///bugtracker.db)
    HOST                     : Interface the API server binds to (default: 127.0.0.1)
    PORT                     : Port the API server listens on (default: 5000)
    BUGTRACKER_CORS_ORIGINS  : Comma-separated allowed origins, or * (default: *)
    BUGTRACKER_LOG_LEVEL     : Root log level (default: INFO)
    BUGTRACKER_LOG_DIR       : If set, logs are also written to a daily file in this directory
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///bugtracker.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "Settings":
        """Build settings from the process environment"""
        if load_dotenv_file:
            load_dotenv()

        port = os.getenv("PORT", str(DEFAULT_PORT))
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}")

        return cls(
            database_url=os.getenv("BUGTRACKER_DATABASE_URL", DEFAULT_DATABASE_URL),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=port_number,
            cors_origins=_split_origins(os.getenv("BUGTRACKER_CORS_ORIGINS", "*")),
            log_level=os.getenv("BUGTRACKER_LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("BUGTRACKER_LOG_DIR") or None,
        )

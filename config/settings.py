import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from the project root
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))


def _bool_env(name: str, default: str = "1") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value not in {"0", "false", "no"}


def _database_url_from_env() -> Optional[str]:
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    pg_host = os.getenv("PGHOST")
    pg_port = os.getenv("PGPORT", "5432")
    pg_db = os.getenv("PGDATABASE")
    pg_user = os.getenv("PGUSER")
    pg_password = os.getenv("PGPASSWORD")

    if all([pg_host, pg_db, pg_user, pg_password]):
        return f"postgresql+asyncpg://{pg_user}:{pg_password}@{pg_host}:{pg_port}/{pg_db}"
    return None


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and injected."""

    database_url: str
    jwt_secret: str
    stripe_secret_key: Optional[str] = None
    port: int = 8000
    public_base_url: str = "http://localhost:8000"
    upload_dir: str = "upload/images"
    max_upload_files: int = 10
    cart_legacy_slots: int = 300
    search_fuzzy_cutoff: float = 60.0
    sql_echo: bool = False
    log_level: str = "INFO"
    reload: bool = False


def load_settings() -> Settings:
    database_url = _database_url_from_env()
    if database_url is None:
        raise ValueError(
            "DATABASE_URL is not configured. Set DATABASE_URL explicitly or provide "
            "PGHOST/PGPORT/PGDATABASE/PGUSER/PGPASSWORD environment variables."
        )

    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        raise ValueError("JWT_SECRET is not configured. Set it in your .env file.")

    port = int(os.getenv("PORT", "8000"))
    return Settings(
        database_url=database_url,
        jwt_secret=jwt_secret,
        stripe_secret_key=os.getenv("STRIPE_SECRET_KEY"),
        port=port,
        public_base_url=os.getenv("PUBLIC_BASE_URL", f"http://localhost:{port}").rstrip("/"),
        upload_dir=os.getenv("UPLOAD_DIR", "upload/images"),
        max_upload_files=int(os.getenv("MAX_UPLOAD_FILES", "10")),
        cart_legacy_slots=int(os.getenv("CART_LEGACY_SLOTS", "300")),
        search_fuzzy_cutoff=float(os.getenv("SEARCH_FUZZY_CUTOFF", "60")),
        sql_echo=_bool_env("SQL_ECHO", "false"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        reload=_bool_env("RELOAD", "false"),
    )

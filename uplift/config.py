from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the Uplift API."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.env: str = (os.environ.get("UPLIFT_ENV") or "development").strip().lower()
        self.is_production: bool = self.env == "production"

        # ---- Database ----
        self.data_root: Path = Path(
            os.environ.get("UPLIFT_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("UPLIFT_DB_PATH") or (self.data_root / "uplift.db")
        ).expanduser()
        self.db_pool_size: int = int(os.environ.get("UPLIFT_DB_POOL_SIZE") or "10")
        self.db_timeout: float = float(os.environ.get("UPLIFT_DB_TIMEOUT") or "30")

        # ---- Sessions ----
        # In production you MUST set UPLIFT_SESSION_SECRET. The fallback only keeps local
        # demos easy; cookie tokens are hashed with it before they touch the database.
        self.session_secret: str = os.environ.get("UPLIFT_SESSION_SECRET") or "uplift-secret-key"
        self.session_ttl_days: int = int(os.environ.get("UPLIFT_SESSION_TTL_DAYS") or "7")
        secure_raw = (os.environ.get("UPLIFT_COOKIE_SECURE") or "").strip()
        if secure_raw:
            self.cookie_secure: bool = secure_raw in {"1", "true", "True"}
        else:
            self.cookie_secure = self.is_production

        # ---- Server ----
        self.host: str = os.environ.get("UPLIFT_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("UPLIFT_PORT") or "8000")
        self.log_level: str = (os.environ.get("UPLIFT_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("UPLIFT_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()

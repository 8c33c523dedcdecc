from __future__ import annotations

import os
from typing import List


class Settings:
    """Centralized configuration for the LifeTrack API."""

    def __init__(self) -> None:
        # Single-tenant deployments: every request acts as this user.
        self.default_user_id: str = (
            os.environ.get("LIFETRACK_DEFAULT_USER_ID") or "default-user"
        )
        self.log_level: str = (os.environ.get("LIFETRACK_LOG_LEVEL") or "INFO").upper()
        self.seed_exercises: bool = (
            os.environ.get("LIFETRACK_SEED_EXERCISES") or "1"
        ).strip() in {"1", "true", "True", "yes"}
        self.host: str = (
            os.environ.get("LIFETRACK_HOST") or os.environ.get("HOST") or "127.0.0.1"
        )
        port_raw = os.environ.get("LIFETRACK_PORT") or os.environ.get("PORT") or "8000"
        try:
            self.port: int = int(port_raw)
        except ValueError:
            self.port = 8000

        cors = os.environ.get("LIFETRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()

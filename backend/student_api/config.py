"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    ENV: str
    DATABASE_URL: str
    HOST: str
    PORT: int
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    SQL_ECHO: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'students.db'}")
        self.HOST = os.getenv("HOST", "0.0.0.0")
        try:
            self.PORT = int(os.getenv("PORT", "5000"))
        except ValueError:
            raise RuntimeError("PORT must be an integer")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self._validate()

    def _validate(self):
        if not self.DATABASE_URL.strip():
            raise RuntimeError("DATABASE_URL must not be empty")
        if not 0 < self.PORT < 65536:
            raise RuntimeError("PORT must be between 1 and 65535")


settings = Settings()

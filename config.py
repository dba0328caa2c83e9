# config.py
from pathlib import Path
from dotenv import load_dotenv
import os
from typing import List, Optional


BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

class Settings:
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: List[str] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    # Checked in order when the caller does not pass a key
    API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

    def resolve_api_key(self, provided: Optional[str] = None) -> Optional[str]:
        """Explicit key wins; otherwise read the environment at call time."""
        if provided:
            return provided
        for name in self.API_KEY_ENV_VARS:
            value = os.getenv(name)
            if value:
                return value
        return None


class StaticSettings(Settings):
    """Settings with a fixed fallback key, for callers that manage keys themselves."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.fallback_api_key = api_key
        if model:
            self.GEMINI_MODEL = model

    def resolve_api_key(self, provided: Optional[str] = None) -> Optional[str]:
        return provided or self.fallback_api_key or None


settings = Settings()

# Runtime configuration for the VoyaGo backend functions

import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Configuration read from the environment (and .env, if present)"""

    def __init__(self):
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8080"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Google Cloud Translation, used by the Dialogflow webhook
        self.TRANSLATION_ENABLED: bool = _env_bool("TRANSLATION_ENABLED", True)
        self.GOOGLE_CLOUD_PROJECT: str = os.getenv("GOOGLE_CLOUD_PROJECT", "")

        self.ALLOWED_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "").split(",")
            if origin.strip()
        ]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def cors_origins(self) -> List[str]:
        """Origins allowed to call the callable endpoints"""
        if self.ALLOWED_ORIGINS:
            return self.ALLOWED_ORIGINS
        if self.is_production:
            return ["*"]
        return ["http://localhost:3000", "http://127.0.0.1:3000"]


settings = Settings()

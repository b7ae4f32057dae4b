import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional
from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

# Load environment variables from the correct .env file
env_file = ".env.production" if os.getenv("APP_ENV") == "production" else ".env"
load_dotenv(env_file)

# ventech_api/common/config.py -> <repo>/dist/spa
BASE_DIR = Path(__file__).resolve().parent.parent.parent
DEFAULT_SPA_DIST_PATH = BASE_DIR / "dist" / "spa"

class Settings(BaseSettings):
    APP_ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "info"
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    PING_MESSAGE: str = "ping"

    # Static frontend bundle
    SPA_DIST_PATH: Path = DEFAULT_SPA_DIST_PATH

    # Email settings (Resend)
    RESEND_API_KEY: Optional[str] = None
    RESEND_API_BASE_URL: str = "https://api.resend.com"
    EMAIL_API_TIMEOUT: float = 30.0
    EMAIL_SENDER: str = "noreply@ventechplus.xyz"
    CONTACT_RECIPIENT: str = "admin@ventechplus.xyz"
    COMPANY_NAME: str = "BlackBugs Technologies"

    # Contact form
    MAX_BODY_SIZE: int = 10 * 1024 * 1024

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @property
    def email_configured(self) -> bool:
        """True when a non-blank Resend API key is available."""
        return bool(self.RESEND_API_KEY and self.RESEND_API_KEY.strip())

@lru_cache
def get_settings() -> Settings:
    return Settings()

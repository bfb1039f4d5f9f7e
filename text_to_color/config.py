import os
from typing import List, Optional
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) in ("1", "true", "True")


class Settings(BaseModel):
    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    openai_max_tokens: int = int(os.getenv("OPENAI_MAX_TOKENS", "848"))
    openai_timeout: float = float(os.getenv("OPENAI_TIMEOUT", "60"))
    use_mock_openai: bool = _flag("USE_MOCK_OPENAI")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./text_to_color.db")
    admin_user: str = os.getenv("ADMIN_USER", "admin")
    admin_pass: str = os.getenv("ADMIN_PASS", "changeme")
    app_version: str = os.getenv("APP_VERSION", "0.1.0")
    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "session")
    session_max_age: int = int(os.getenv("SESSION_MAX_AGE", str(24 * 60 * 60)))
    allowed_origins: List[str] = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()]

    @property
    def secure_cookies(self) -> bool:
        return self.app_env == "production"


def get_settings() -> Settings:
    return Settings()

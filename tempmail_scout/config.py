import os
from typing import Optional

from dotenv import load_dotenv


# Load local .env for dev; existing env vars always win
load_dotenv(override=False)


DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
API_LIST_MODEL = "gemini-3-flash-preview"
CODE_GEN_MODEL = "gemini-3-pro-preview"


class ConfigError(RuntimeError):
    """Raised when a required setting is missing."""


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


class Settings:
    """Runtime settings read from the environment.

    GEMINI_API_KEY is the credential for the model gateway; API_KEY is accepted
    as a fallback name.
    """

    def __init__(self):
        self.GEMINI_API_KEY: Optional[str] = (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or "").strip() or None
        self.GEMINI_BASE_URL: str = os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        self.API_LIST_MODEL: str = os.getenv("API_LIST_MODEL", API_LIST_MODEL)
        self.CODE_GEN_MODEL: str = os.getenv("CODE_GEN_MODEL", CODE_GEN_MODEL)
        self.HTTP_TIMEOUT_SECONDS: float = _env_float("HTTP_TIMEOUT_SECONDS", 60.0)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def require_api_key(self) -> str:
        if not self.GEMINI_API_KEY:
            raise ConfigError("GEMINI_API_KEY (or API_KEY) is not set; add it to the environment or .env")
        return self.GEMINI_API_KEY

    def __repr__(self) -> str:
        # never print the key itself
        key_state = "set" if self.GEMINI_API_KEY else "missing"
        return (f"Settings(base_url={self.GEMINI_BASE_URL!r}, list_model={self.API_LIST_MODEL!r}, "
                f"code_model={self.CODE_GEN_MODEL!r}, api_key={key_state})")


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()

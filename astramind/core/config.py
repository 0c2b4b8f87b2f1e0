"""
Configuration management via environment variables.

This module loads configuration from a .env file using python-dotenv.
All configuration values are accessed through the Settings class.

A missing provider credential is not a startup failure: the application
boots and every generation call reports the problem instead.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


SUPPORTED_PROVIDERS = ("google", "groq")


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Console logging verbosity
        log_dir: Directory for daily log files (empty disables file logging)
        llm_provider: Generative-text provider ("google" or "groq")
        gemini_api_key: API key for Google Gemini
        groq_api_key: API key for Groq
        llm_model: Gemini model identifier
        groq_model: Groq model identifier
        llm_temperature: Sampling temperature
        llm_max_tokens: Maximum response length
        max_message_length: Longest chat message accepted
        enable_audit_logging: Toggle request audit middleware
    """
    # Application settings
    app_name: str = "AstraMind"
    app_env: str = "development"
    log_level: str = "INFO"
    log_dir: str = "logs"

    # LLM settings
    llm_provider: str = "google"
    gemini_api_key: str = ""
    groq_api_key: str = ""
    llm_model: str = "gemini-2.5-flash"
    groq_model: str = "llama-3.3-70b-versatile"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 8192

    # Request limits
    max_message_length: int = 4000

    enable_audit_logging: bool = True

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"

    def active_api_key(self) -> str:
        """Credential for the configured provider (may be empty)."""
        if self.llm_provider == "groq":
            return self.groq_api_key
        return self.gemini_api_key


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in ("1", "true", "yes", "on")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; call ``get_settings.cache_clear()``
    to force a reload (tests do this after patching the environment).

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If LLM_PROVIDER names an unsupported provider
    """
    provider = _get_env("LLM_PROVIDER", "google").strip().lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported LLM_PROVIDER '{provider}'. "
            f"Expected one of: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    # GEMINI_API_KEY takes priority, GOOGLE_API_KEY is accepted as an alias
    gemini_key = os.environ.get("GEMINI_API_KEY") or _get_env("GOOGLE_API_KEY", "")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "AstraMind"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=_get_env("LOG_DIR", "logs"),

        # LLM
        llm_provider=provider,
        gemini_api_key=gemini_key,
        groq_api_key=_get_env("GROQ_API_KEY", ""),
        llm_model=_get_env("LLM_MODEL", "gemini-2.5-flash"),
        groq_model=_get_env("GROQ_MODEL", "llama-3.3-70b-versatile"),
        llm_temperature=float(_get_env("LLM_TEMPERATURE", "0.7")),
        llm_max_tokens=int(_get_env("LLM_MAX_TOKENS", "8192")),

        max_message_length=int(_get_env("MAX_MESSAGE_LENGTH", "4000")),

        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
    )

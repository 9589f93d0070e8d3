import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream advice provider
    advice_api_url: str = os.getenv("ADVICE_API_URL", "https://api.adviceslip.com/advice")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "5.0"))

    # Per-request budget enforced by the timeout middleware
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "10.0"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "DEBUG")
    log_file: str | None = os.getenv("LOG_FILE")

    # API
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "3000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.upstream_timeout <= 0:
            raise ValueError("UPSTREAM_TIMEOUT must be greater than 0")

        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than 0")

        if not 0 < self.api_port < 65536:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()

"""Configuration, read once at startup."""

import math
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from dotenv import load_dotenv

load_dotenv()

GROQ_ENDPOINT = "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODEL = "llama3-70b-8192"
REQUEST_TIMEOUT_SECONDS = 20.0


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid"""
    pass


@dataclass(frozen=True)
class AppConfig:
    """Immutable process configuration, passed into the components that need it."""

    discord_token: str = ""
    groq_api_key: str = ""
    groq_model: str = GROQ_MODEL
    groq_endpoint: str = GROQ_ENDPOINT
    request_timeout: float = REQUEST_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables (and .env, if present)."""
        raw_timeout = os.getenv("GROQ_TIMEOUT_SECONDS", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else REQUEST_TIMEOUT_SECONDS
        except ValueError:
            raise ConfigError(f"GROQ_TIMEOUT_SECONDS={raw_timeout!r} is not a number")

        return cls(
            discord_token=os.getenv("DISCORD_BOT_TOKEN", "").strip(),
            groq_api_key=os.getenv("GROQ_API_KEY", "").strip(),
            groq_model=os.getenv("GROQ_MODEL", "").strip() or GROQ_MODEL,
            groq_endpoint=os.getenv("GROQ_ENDPOINT", "").strip() or GROQ_ENDPOINT,
            request_timeout=timeout,
        )

    def validate(self) -> "AppConfig":
        missing = []
        if not self.discord_token:
            missing.append("DISCORD_BOT_TOKEN")
        if not self.groq_api_key:
            missing.append("GROQ_API_KEY")
        if missing:
            raise ConfigError(f"{', '.join(missing)} is not set")
        # nan and inf would leave the completion call unbounded
        if not math.isfinite(self.request_timeout) or self.request_timeout <= 0:
            raise ConfigError(f"request timeout must be a positive number, got {self.request_timeout}")
        endpoint = urlparse(self.groq_endpoint)
        if endpoint.scheme not in ("http", "https") or not endpoint.netloc:
            raise ConfigError(f"GROQ_ENDPOINT={self.groq_endpoint!r} is not an http(s) URL")
        return self

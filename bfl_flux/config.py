"""Client settings from environment variables."""

from functools import lru_cache
from dotenv import load_dotenv

from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Client settings from environment."""

    # API
    bfl_api_key: str = ""
    bfl_base_url: str = "https://api.bfl.ai/v1"
    request_timeout_seconds: float = 30.0

    # Configuration
    log_level: str = "INFO"
    poll_max_attempts: int = 60
    poll_delay_seconds: int = 5

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Get cached client settings."""
    return Settings()

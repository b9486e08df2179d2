"""Configuration settings for the prompt enrichment engine."""

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings(BaseSettings):
    """Runtime settings, overridable with SPARKLE_* environment variables."""

    # Extraction budget, also the token count that earns full text points
    max_tokens: int = 2000

    # Latency budget for a single enrichment (milliseconds)
    latency_budget_ms: float = 500
    latency_warning_ratio: float = 0.8  # enrichment warns past this share of the budget
    scrape_warning_ratio: float = 0.5  # page scraping warns past this share

    # Output quality thresholds
    min_expansion_ratio: float = 4.0
    min_enriched_length: int = 200

    log_level: str = "INFO"

    class Config:
        env_prefix = "SPARKLE_"
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()

"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    default_tax_year: str = "2024"
    rate_table_file: str = ""
    log_level: str = "INFO"

    @property
    def rate_table_path(self) -> str | None:
        """Return the rate table override path, or None to use built-in tables."""
        return self.rate_table_file or None

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

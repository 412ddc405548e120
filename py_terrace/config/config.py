"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Terrain defaults
    height_step: int = Field(default=1, gt=0, description="Default height step for new terrains")
    max_propagation_steps: int = Field(
        default=1_000_000, gt=0, description="Worklist pops allowed per cascade before aborting"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "TERRACE_"


settings = Settings()

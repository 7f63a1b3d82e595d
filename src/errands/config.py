"""
Configuration management for the Errands API
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    # The bare PORT variable is honoured for hosting platforms that inject it
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("errands_api_port", "port"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Store
    id_strategy: Literal["counter", "length"] = "counter"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "ERRANDS_"
        case_sensitive = False
        populate_by_name = True


# Global settings instance
settings = Settings()

"""Application configuration via environment variables."""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    aws_region: str = "us-west-2"
    default_secret_name: str = "mario/defaultSecret"
    secret_version_stage: str = "AWSCURRENT"
    secretsmanager_endpoint: str = ""  # For local Secrets Manager
    authlog_tablename: str = "MarioAuthLog"
    dynamodb_endpoint: str = ""  # For local DynamoDB
    cors_allow_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": False}


settings: Settings | None = None


def get_settings() -> Settings:
    global settings
    if settings is None:
        settings = Settings()
    return settings


def override_settings(s: Settings | None) -> None:
    """For testing: inject a Settings instance (None reloads from env)."""
    global settings
    settings = s


def configure_logging(s: Settings | None = None) -> None:
    """Apply the configured level to the root logger.

    Lambda's Python runtime starts the root logger at WARNING; both Lambda
    entry points call this at import.
    """
    s = s or get_settings()
    logging.getLogger().setLevel(s.log_level.upper())

"""
Configuration Settings.

This module defines the worker configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Worker settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="TASKWORKER_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log record format (simple, detailed, json)",
        alias="TASKWORKER_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory the file handler writes into",
        alias="TASKWORKER_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write log records to <log_file_dir>/taskworker.log",
        alias="TASKWORKER_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Task Loop Configuration
    # =====================================================================
    verbose: bool = Field(
        default=False,
        description="Default verbosity of run_task when the caller does not pass one",
        alias="TASKWORKER_VERBOSE",
    )
    recursion_limit: int = Field(
        default=sys.maxsize,
        gt=0,
        description="LangGraph recursion limit for one task run; unbounded unless set",
        alias="TASKWORKER_RECURSION_LIMIT",
    )


settings = Settings()

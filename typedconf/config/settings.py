"""
Settings Models

Pydantic models describing how to build a Config and how to log.
"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from typedconf.providers.document_provider import DEFAULT_ENV_VAR
from typedconf.utils.logger import setup_logging


class SourceSettings(BaseModel):
    """Where a Config gets its values from."""
    kind: Literal['dotenv', 'json', 'yaml'] = Field('dotenv', description="Source format")
    path: Optional[str] = Field(None, description="File path; .env is the dotenv default")
    env_var: str = Field(DEFAULT_ENV_VAR, min_length=1, description="Override variable for document sources")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def check_path(self):
        if self.path is None and self.kind != 'dotenv':
            raise ValueError(f"path is required for {self.kind} sources")
        return self


class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = Field('INFO', description="Log level")
    format: str = Field('json', description="Log format (json or text)")
    file: Optional[str] = Field(None, description="Log file path")
    max_bytes: int = Field(10485760, ge=1024, description="Max log file size")
    backup_count: int = Field(5, ge=1, le=20, description="Number of backup log files")
    console: bool = Field(True, description="Log to console")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        valid_formats = ['json', 'text']
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()

    def apply(self, logger_name: str = 'typedconf') -> logging.Logger:
        """Configure logging with these settings."""
        return setup_logging(
            level=self.level,
            log_file=self.file,
            max_bytes=self.max_bytes,
            backup_count=self.backup_count,
            format_type=self.format,
            console=self.console,
            logger_name=logger_name,
        )

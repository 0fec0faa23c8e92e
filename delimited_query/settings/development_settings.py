"""
Settings for development environment
"""
import sys
from typing import ClassVar, TextIO

from pydantic_settings import SettingsConfigDict

from delimited_query.settings.app_settings import AppSettings


class DevAppSettings(AppSettings):
    """
    Settings for development environment
    """

    debug: bool = True

    loguru_level: str = "DEBUG"

    logger_sink: ClassVar[str | TextIO] = sys.stderr

    model_config = SettingsConfigDict(env_file=".dev.env", extra="ignore")

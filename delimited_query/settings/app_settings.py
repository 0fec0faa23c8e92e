"""
App settings base class
"""
from typing import ClassVar, TextIO

from pydantic_settings import BaseSettings

from delimited_query.settings.app_env_types import AppEnvTypes


class AppSettings(BaseSettings):
    """
    App settings main class with parameters definition
    """

    app_env: AppEnvTypes = AppEnvTypes.PROD
    debug: bool = False
    loguru_level: str = "INFO"
    logger_sink: ClassVar[str | TextIO] = "logs/app.log"

    api_prefix: str = "/api"
    api_version: str = "v0"

    git_commit: str = "-"
    git_branch: str = "-"

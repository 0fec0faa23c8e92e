"""
Settings for production environment
"""
from pydantic_settings import SettingsConfigDict

from delimited_query.settings.app_settings import AppSettings


class ProdAppSettings(AppSettings):
    """
    Settings for production environment
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

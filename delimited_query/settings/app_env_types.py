"""
Application environment types
"""
from enum import Enum


class AppEnvTypes(Enum):
    """
    Environments the application can run in, selected with APP_ENV
    """
    PROD: str = "PROD"
    DEV: str = "DEV"
    TEST: str = "TEST"

"""Main application module, defining the FastAPI app and its configuration."""
import sys

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger

from delimited_query.config import get_app_settings
from delimited_query.errors.validation_error import request_validation_error_handler
from delimited_query.routes.api import router as api_router
from delimited_query.routes.healthness import router as healthness_router
from delimited_query.settings.app_env_types import AppEnvTypes


class DelimitedQueryApi(FastAPI):
    """Demo application, routing logic and logging setup"""

    def __init__(self):
        settings = get_app_settings()
        super().__init__(debug=settings.debug)

        self.include_router(
            api_router, prefix=f"{settings.api_prefix}/{settings.api_version}"
        )

        self.include_router(healthness_router, prefix="/health")

        if settings.app_env != AppEnvTypes.TEST:
            logger.remove()
            logger.add(
                settings.logger_sink,
                level=settings.loguru_level,
                **({"rotation": "100 MB"} if settings.logger_sink != sys.stderr else {}),
            )

        self.add_exception_handler(RequestValidationError, request_validation_error_handler)

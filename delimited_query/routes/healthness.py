""" Health routes"""
from typing import Annotated

from fastapi import APIRouter, Depends

from delimited_query.config import get_app_settings
from delimited_query.settings.app_settings import AppSettings

router = APIRouter(tags=["health"])


@router.get("/", name="health")
async def health(settings: Annotated[AppSettings, Depends(get_app_settings)]) -> dict:
    """
    Liveness probe with build information
    :param settings: AppSettings dependency
    :return: status and build identifiers
    """
    return {
        "status": "ok",
        "git_commit": settings.git_commit,
        "git_branch": settings.git_branch,
    }

"""
API redirection router
"""

from fastapi import APIRouter

from delimited_query.routes import items

router = APIRouter()
router.include_router(items.router, tags=["items"], prefix="/items")

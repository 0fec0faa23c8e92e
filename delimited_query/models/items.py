"""Models for the items search query"""
from __future__ import annotations

from enum import Enum
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field


class ItemFields(str, Enum):
    """Optional item fields a client can ask for"""
    GENRES = "Genres"
    OVERVIEW = "Overview"
    PATH = "Path"
    PEOPLE = "People"
    STUDIOS = "Studios"
    TAGS = "Tags"


class ImageType(str, Enum):
    """Image kinds an item can carry"""
    PRIMARY = "Primary"
    BACKDROP = "Backdrop"
    BANNER = "Banner"
    LOGO = "Logo"
    THUMB = "Thumb"


class ItemQuery(BaseModel):
    """Bound parameters of /items"""
    ids: List[UUID] = Field(default_factory=list, description="Item identifiers")
    fields: List[ItemFields] = Field(
        default_factory=list, description="Additional fields to include")
    years: List[int] = Field(default_factory=list, description="Production years")
    image_types: List[ImageType] = Field(
        default_factory=list, description="Required image types")
    limit: int = Field(default=20, ge=1, le=100, description="Page size")

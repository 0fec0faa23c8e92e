""" Items routes"""

from __future__ import annotations

from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from delimited_query.binders.query import DelimitedQuery, PipeDelimitedQuery
from delimited_query.models.items import ImageType, ItemFields, ItemQuery

router = APIRouter(tags=["items"])

tags_metadata = [
    {
        "name": "items",
        "description": "Item lookup filtered by delimited list parameters.",
    }
]


@router.get(
    "/",
    name="search_items",
    summary="Bind delimited list parameters and echo the resulting query.",
    response_model=ItemQuery,
)
async def search_items(
        ids: Annotated[List[UUID], Depends(DelimitedQuery(
            "ids", UUID, description='Comma-separated item UUIDs, e.g. "id1,id2".'))],
        fields: Annotated[List[ItemFields], Depends(DelimitedQuery(
            "fields", ItemFields, description='Comma-separated item fields, e.g. "Genres,People".'))],
        years: Annotated[List[int], Depends(DelimitedQuery(
            "years", int, description='Comma-separated production years, e.g. "1999,2003".'))],
        image_types: Annotated[
            List[ImageType], Depends(PipeDelimitedQuery(
                "image_types", ImageType,
                description='Pipe-separated image types, e.g. "Primary|Logo".'))
        ],
        limit: int = Query(20, ge=1, le=100, description="Page size (default 20, max 100)."),
) -> ItemQuery:
    """
    Items search endpoint.

    List parameters accept either one delimited value ("?years=2001,2002")
    or repeated occurrences ("?years=2001&years=2002"). Malformed entries are dropped.
    :param ids: comma-delimited item UUIDs
    :param fields: comma-delimited ItemFields names
    :param years: comma-delimited production years
    :param image_types: pipe-delimited ImageType names
    :param limit: page size
    :return: the bound query
    """
    return ItemQuery(
        ids=ids,
        fields=fields,
        years=years,
        image_types=image_types,
        limit=limit,
    )

"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from blog.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List known tags",
    description="Get the canonical tag names, ordered by name.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    limit: int = Query(default=100, ge=1, le=1000),
) -> ListTagsResponse:
    """List known tags.

    Args:
        use_case: List tags use case (injected)
        limit: Maximum number of tags to return

    Example:
        GET /tags?limit=10
    """
    with logfire.span("api.list_tags", limit=limit):
        return await use_case.execute(ListTagsRequest(limit=limit))

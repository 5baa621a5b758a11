"""Search posts use case."""

import math

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.base import CamelModel
from blog.application.usecase.post.common import PostResponse
from blog.config import Settings
from blog.domain.error import BadRequestError
from blog.domain.service import PostService
from blog.domain.value import SearchQuery


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    search: str = ""  # "#tag" tokens filter by tag, the rest by title
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)


class SearchPostsResponse(CamelModel):
    """One page of search results."""

    posts: list[PostResponse]
    has_prev: bool
    has_next: bool
    last_page: int


class SearchPostsUseCase:
    """Use case for paginated, tag-filtered post search."""

    def __init__(self, post_service: PostService, settings: Settings) -> None:
        """Initialize search posts use case.

        Args:
            post_service: Post domain service
            settings: Application settings (preview length)
        """
        self.post_service = post_service
        self.settings = settings

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Execute search flow.

        Steps:
        1. Parse the search into tag filters and a title substring
        2. Count matches and derive last_page, has_prev, has_next
        3. Reject pages beyond the last one
        4. Fetch the page with tags and cut bodies to a preview

        Args:
            request: Search string and 1-based page

        Returns:
            Page of posts with navigation flags

        Raises:
            BadRequestError: If page_number is beyond the last page
            InvalidTagError: If a tag token normalizes to nothing
        """
        query = SearchQuery.parse(request.search)

        with logfire.span(
            "search_posts.execute",
            tags=sorted(query.tags),
            title=query.title,
            page_number=request.page_number,
            page_size=request.page_size,
        ):
            page_size = request.page_size
            offset = (request.page_number - 1) * page_size

            total = await self.post_service.count_posts(query)
            last_page = max(1, math.ceil(total / page_size))

            if request.page_number > last_page:
                logfire.warn(
                    "Requested page exceeds last page",
                    page_number=request.page_number,
                    last_page=last_page,
                )
                raise BadRequestError(
                    f"Requested page {request.page_number} exceeds the total "
                    f"number of pages ({last_page})."
                )

            posts = await self.post_service.find_posts(
                query, limit=page_size, offset=offset
            )

            preview_length = self.settings.search.preview_length
            items = [PostResponse.from_post(post, preview_length) for post in posts]

            logfire.info("Posts searched", count=len(items), total=total)

            return SearchPostsResponse(
                posts=items,
                has_prev=request.page_number > 1,
                has_next=request.page_number < last_page,
                last_page=last_page,
            )

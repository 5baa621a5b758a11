"""Post domain service."""

import logfire

from blog.domain.error import ConflictError, ImageNotSetError, NotFoundError
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository, TagRepository
from blog.domain.value import PostId, SearchQuery, normalize_tag_names

from .base import Service


class PostService(Service):
    """Domain service for post operations.

    Composes the post and tag repositories so that posts always come back
    with their tags attached.
    """

    def __init__(
        self, post_repository: PostRepository, tag_repository: TagRepository
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            tag_repository: Tag repository (associations and tag hydration)
        """
        self.post_repository = post_repository
        self.tag_repository = tag_repository

    async def _with_tags(self, posts: list[Post]) -> list[Post]:
        """Attach tags to posts with one batch lookup."""
        if not posts:
            return []
        post_tag_map = await self.tag_repository.find_by_post_ids(
            [post.id for post in posts]
        )
        return [
            post.model_copy(update={"tags": post_tag_map.get(post.id, [])})
            for post in posts
        ]

    async def count_posts(self, query: SearchQuery) -> int:
        """Count posts matching a search.

        Args:
            query: Parsed search

        Returns:
            Number of matching posts
        """
        return await self.post_repository.count(tags=query.tags, title=query.title)

    async def find_posts(
        self, query: SearchQuery, limit: int, offset: int
    ) -> list[Post]:
        """Find one page of posts matching a search, with tags.

        Ids are selected first, then hydrated and merged with tags in one
        batch query each.

        Args:
            query: Parsed search
            limit: Page size
            offset: Number of posts to skip

        Returns:
            Posts ordered by created_at desc, id desc
        """
        with logfire.span(
            "post_service.find_posts",
            tags=sorted(query.tags),
            title=query.title,
            limit=limit,
            offset=offset,
        ):
            post_ids = await self.post_repository.find_ids(
                tags=query.tags, title=query.title, limit=limit, offset=offset
            )
            posts = await self.post_repository.find_by_ids(post_ids)
            return await self._with_tags(posts)

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID, with tags.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            [post] = await self._with_tags([post])
            return post

    async def ensure_exists(self, post_id: PostId) -> None:
        """Raise NotFoundError unless the post exists.

        Args:
            post_id: Post ID
        """
        if not await self.post_repository.exists_by_id(post_id):
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))

    async def create_post(self, title: str, text: str, tag_names: list[str]) -> Post:
        """Create a post and associate its tags.

        Args:
            title: Post title
            text: Markdown body
            tag_names: Raw tag names (normalized here)

        Returns:
            Created post with tags

        Raises:
            InvalidTagError: If a tag is empty after trimming
            ConflictError: If the store did not return the new post
        """
        names = normalize_tag_names(tag_names)

        with logfire.span("post_service.create_post", title=title, tags=names):
            post = await self.post_repository.create(title=title, text=text)
            if post is None:
                raise ConflictError(f"Failed to create post: {title!r}")

            if names:
                await self.tag_repository.replace_post_tags(post.id, names)

            logfire.info("Post created", post_id=str(post.id), tags=names)
            return await self.get_post(post.id)

    async def update_post(
        self, post_id: PostId, title: str, text: str, tag_names: list[str]
    ) -> Post:
        """Update a post's title, text and tags.

        An empty tag list removes every tag from the post.

        Args:
            post_id: Post ID
            title: New title
            text: New body
            tag_names: Desired raw tag names

        Returns:
            Updated post with tags

        Raises:
            NotFoundError: If the post doesn't exist
        """
        names = normalize_tag_names(tag_names)

        with logfire.span("post_service.update_post", post_id=str(post_id), tags=names):
            updated = await self.post_repository.update(post_id, title=title, text=text)
            if updated is None:
                logfire.warn("Post not found for update", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            await self.tag_repository.replace_post_tags(post_id, names)

            logfire.info("Post updated", post_id=str(post_id), tags=names)
            return await self.get_post(post_id)

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post and its tag associations.

        Tags left without posts stay until the next orphan purge.

        Args:
            post_id: Post ID

        Raises:
            NotFoundError: If nothing was deleted
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            if not await self.post_repository.delete(post_id):
                logfire.warn("Post not found for delete", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            await self.tag_repository.remove_post_tags(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def like_post(self, post_id: PostId) -> int:
        """Atomically add one like to a post.

        Args:
            post_id: Post ID

        Returns:
            The new like count

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.like_post", post_id=str(post_id)):
            likes = await self.post_repository.increment_likes(post_id)
            if likes is None:
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post liked", post_id=str(post_id), likes_count=likes)
            return likes

    async def set_image(self, post_id: PostId, data: bytes) -> None:
        """Replace a post's image.

        Args:
            post_id: Post ID
            data: Raw image bytes

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.set_image", post_id=str(post_id), size=len(data)):
            if not await self.post_repository.set_image(post_id, data):
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post image updated", post_id=str(post_id), size=len(data))

    async def get_image(self, post_id: PostId) -> bytes:
        """Read a post's image.

        Args:
            post_id: Post ID

        Returns:
            Raw image bytes

        Raises:
            NotFoundError: If the post doesn't exist
            ImageNotSetError: If the post has no image
        """
        with logfire.span("post_service.get_image", post_id=str(post_id)):
            await self.ensure_exists(post_id)

            data = await self.post_repository.get_image(post_id)
            if data is None:
                logfire.warn("Post has no image", post_id=str(post_id))
                raise ImageNotSetError(str(post_id))

            return data

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment a post's comment count.

        Args:
            post_id: Post ID

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.increment_comment_count", post_id=str(post_id)):
            if not await self.post_repository.increment_comments(post_id):
                logfire.error(
                    "Post not found for comment count increment", post_id=str(post_id)
                )
                raise NotFoundError("Post", str(post_id))
            logfire.info("Comment count incremented", post_id=str(post_id))

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement a post's comment count (minimum 0).

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.decrement_comment_count", post_id=str(post_id)):
            if await self.post_repository.decrement_comments(post_id):
                logfire.info("Comment count decremented", post_id=str(post_id))
            else:
                logfire.warn(
                    "Comment count already zero or post missing", post_id=str(post_id)
                )

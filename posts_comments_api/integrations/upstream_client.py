"""
HTTP client for the upstream content API.

This module provides an async client that fetches posts and comments from the
public content API and decodes them into DTOs. Every failure is surfaced as an
``UpstreamError``; there is no retry and no caching.
"""

from typing import List, Optional, Type, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from posts_comments_api.config import get_settings
from posts_comments_api.models.dtos import Comment, Post

COMMENTS_PATH = "comments"
POSTS_PATH = "posts"

ModelT = TypeVar("ModelT", bound=BaseModel)


class UpstreamError(Exception):
    """Raised when the upstream API cannot be reached or answers badly."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UpstreamClient:
    """
    Async client for the upstream posts/comments API.

    One instance holds one ``httpx.AsyncClient`` and is shared by all
    requests for the lifetime of the application.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the upstream client.

        Args:
            base_url: Base URL of the upstream API
            timeout: Request timeout in seconds
            client: Pre-built HTTP client, mainly for tests
        """
        settings = get_settings()
        self.base_url = (base_url or settings.UPSTREAM_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self.client = client or httpx.AsyncClient(
            headers=headers,
            timeout=httpx.Timeout(self.timeout),
        )

        logger.info(f"Initialized UpstreamClient with base_url: {self.base_url}")

    async def __aenter__(self) -> "UpstreamClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
        logger.info("UpstreamClient closed")

    async def _get(self, path: str, what: str) -> object:
        """
        Perform a GET request and return the decoded JSON payload.

        Args:
            path: Path relative to the base URL
            what: Human-readable name of the resource, for error messages

        Returns:
            object: Parsed JSON body

        Raises:
            UpstreamError: On transport failure, timeout, non-200 status or
                a body that is not JSON
        """
        url = f"{self.base_url}/{path}"
        logger.debug(f"Fetching {what} from {url}")

        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as e:
            raise UpstreamError(f"timed out fetching {what}: {e}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"failed to perform http request for {what}: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise UpstreamError(
                f"failed to get {what} from client, resp status: {response.status_code}, err: {response.text}",
                response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"failed to decode get {what} response: {e}", response.status_code) from e

    async def _get_list(self, path: str, what: str, model: Type[ModelT]) -> List[ModelT]:
        payload = await self._get(path, what)
        try:
            return TypeAdapter(List[model]).validate_python(payload)
        except ValidationError as e:
            raise UpstreamError(f"failed to decode get {what} response: {e}") from e

    async def get_comments(self) -> List[Comment]:
        """
        Fetch every comment.

        Returns:
            List[Comment]: All comments, in upstream order

        Raises:
            UpstreamError: If the request or decoding fails
        """
        comments = await self._get_list(COMMENTS_PATH, "comments", Comment)
        logger.debug(f"Fetched {len(comments)} comments")
        return comments

    async def get_posts(self) -> List[Post]:
        """
        Fetch every post.

        Returns:
            List[Post]: All posts, in upstream order

        Raises:
            UpstreamError: If the request or decoding fails
        """
        posts = await self._get_list(POSTS_PATH, "posts", Post)
        logger.debug(f"Fetched {len(posts)} posts")
        return posts

    async def get_post(self, post_id: int) -> Post:
        """
        Fetch a single post by id.

        Raises:
            UpstreamError: If the request or decoding fails, including when
                the post does not exist
        """
        payload = await self._get(f"{POSTS_PATH}/{post_id}", "post")
        try:
            return Post.model_validate(payload)
        except ValidationError as e:
            raise UpstreamError(f"failed to decode get post response: {e}") from e

"""
Post endpoints.

``GET /top-posts`` ranks every upstream post by its number of comments.
"""

import asyncio

from fastapi import Depends
from fastapi.responses import JSONResponse
from loguru import logger

from posts_comments_api.api.dependencies import get_upstream_client
from posts_comments_api.core.top_posts import rank_posts_by_comments
from posts_comments_api.integrations.upstream_client import UpstreamClient
from posts_comments_api.models.responses import ok_response


async def get_top_posts_by_comments(
    client: UpstreamClient = Depends(get_upstream_client),
) -> JSONResponse:
    """
    Rank posts by descending comment count.

    Both collections are fetched concurrently; if either fetch fails the
    ``UpstreamError`` propagates to the application's exception handler.

    Returns:
        JSONResponse: ``{"statusCode": 200, "items": [TopPost, ...]}``
    """
    comments, posts = await asyncio.gather(client.get_comments(), client.get_posts())

    top_posts = rank_posts_by_comments(posts, comments)
    logger.info(f"Ranked {len(top_posts)} posts over {len(comments)} comments")
    return ok_response(top_posts)

"""
Comment endpoints.

``POST /filtered-comments`` filters every upstream comment by the predicates
given in the request body.
"""

from fastapi import Depends
from fastapi.responses import JSONResponse
from loguru import logger

from posts_comments_api.api.dependencies import get_upstream_client
from posts_comments_api.core.comment_filter import filter_comments
from posts_comments_api.integrations.upstream_client import UpstreamClient
from posts_comments_api.models.dtos import GetCommentsByFilterRequest
from posts_comments_api.models.responses import ok_response


async def get_comments_by_filter(
    request: GetCommentsByFilterRequest,
    client: UpstreamClient = Depends(get_upstream_client),
) -> JSONResponse:
    """
    Filter comments with AND/OR predicates.

    Args:
        request: Decoded filter request; an undecodable body never reaches
            this handler
        client: Upstream API client

    Returns:
        JSONResponse: ``{"statusCode": 200, "items": [Comment, ...]}``

    Raises:
        UpstreamError: If the comments cannot be fetched
        CommentFilterError: If a filter is invalid
    """
    comments = await client.get_comments()

    result = filter_comments(comments, request.filters, request.filter_relationship)
    logger.info(
        f"Filtered comments with {len(request.filters)} filter(s) "
        f"({request.filter_relationship.value}): {len(result)} item(s)"
    )
    return ok_response(result)

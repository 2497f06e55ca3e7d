"""Request-scoped dependencies shared by the endpoint modules."""

from fastapi import Request

from posts_comments_api.integrations.upstream_client import UpstreamClient


def get_upstream_client(request: Request) -> UpstreamClient:
    """Return the upstream client created by the application lifespan."""
    return request.app.state.upstream_client

"""External service integrations."""

from .upstream_client import UpstreamClient, UpstreamError

__all__ = ["UpstreamClient", "UpstreamError"]

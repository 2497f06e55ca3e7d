"""
Models package for the posts & comments API.

This package contains the pydantic DTOs and the response envelope.
"""

from .dtos import (
    UINT32_MAX,
    Comment,
    Filter,
    FilterRelationship,
    FilterValue,
    GetCommentsByFilterRequest,
    Post,
    TopPost,
    ValueKind,
)
from .responses import (
    BAD_REQUEST_ERROR_RESPONSE_BODY,
    INTERNAL_SERVER_ERROR_RESPONSE_BODY,
    NOT_FOUND_ERROR_RESPONSE_BODY,
    ResponseBody,
    bad_request_response,
    ok_response,
)

__all__ = [
    # DTOs
    "UINT32_MAX",
    "Comment",
    "Filter",
    "FilterRelationship",
    "FilterValue",
    "GetCommentsByFilterRequest",
    "Post",
    "TopPost",
    "ValueKind",
    # Envelope
    "BAD_REQUEST_ERROR_RESPONSE_BODY",
    "INTERNAL_SERVER_ERROR_RESPONSE_BODY",
    "NOT_FOUND_ERROR_RESPONSE_BODY",
    "ResponseBody",
    "bad_request_response",
    "ok_response",
]

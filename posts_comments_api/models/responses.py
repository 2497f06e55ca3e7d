"""
Response envelope shared by every endpoint.

Every response body has the shape ``{statusCode, body?, items?, error?}``.
The static error envelopes are frozen module constants; callers that need to
attach detail derive a copy with ``model_copy(update=...)``.
"""

from typing import Any, List, Optional, Sequence

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field


class ResponseBody(BaseModel):
    status_code: int = Field(alias="statusCode")
    body: Optional[str] = None
    items: Optional[List[Any]] = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_response(self) -> JSONResponse:
        """Render the envelope as a JSON response carrying its own status code."""
        return JSONResponse(
            status_code=self.status_code,
            content=self.model_dump(by_alias=True, exclude_none=True),
        )


INTERNAL_SERVER_ERROR_RESPONSE_BODY = ResponseBody(
    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    body="An internal server occured",
)
NOT_FOUND_ERROR_RESPONSE_BODY = ResponseBody(
    status_code=status.HTTP_404_NOT_FOUND,
    body="This API endpoint is not found",
)
BAD_REQUEST_ERROR_RESPONSE_BODY = ResponseBody(
    status_code=status.HTTP_400_BAD_REQUEST,
    body="Invalid request body is provided",
)


def ok_response(items: Sequence[BaseModel]) -> JSONResponse:
    """
    Wrap a list of models in a 200 envelope.

    Args:
        items: Models to serialize, using their wire aliases.

    Returns:
        JSONResponse: ``{"statusCode": 200, "items": [...]}``
    """
    payload = ResponseBody(
        status_code=status.HTTP_200_OK,
        items=[item.model_dump(mode="json", by_alias=True) for item in items],
    )
    return payload.to_response()


def bad_request_response(error: str) -> JSONResponse:
    """Bad-request envelope with a specific validation message attached."""
    return BAD_REQUEST_ERROR_RESPONSE_BODY.model_copy(update={"error": error}).to_response()

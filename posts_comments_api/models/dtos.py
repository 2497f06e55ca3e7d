"""
Pydantic Data Transfer Objects (DTOs) for the posts & comments API.

These models describe the upstream records, the filter request accepted by
``POST /filtered-comments`` and the ranked projection returned by
``GET /top-posts``.
"""

import math
from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UINT32_MAX = 2**32 - 1

UInt32 = Annotated[int, Field(ge=0, le=UINT32_MAX)]


class Post(BaseModel):
    """
    A post as served by the upstream API.

    Snapshots are fetched per request and never modified afterwards.
    """
    id: UInt32
    user_id: UInt32 = Field(alias="userId")
    title: str
    body: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Comment(BaseModel):
    """
    A comment as served by the upstream API.

    Serialized back to clients with the upstream field names (``postId``).
    """
    id: UInt32
    post_id: UInt32 = Field(alias="postId")
    name: str
    email: str
    body: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TopPost(BaseModel):
    """
    A post annotated with the number of comments that reference it.
    """
    post_id: UInt32
    post_title: str
    post_body: str
    total_number_of_comments: UInt32

    model_config = ConfigDict(frozen=True)


class FilterRelationship(str, Enum):
    """How multiple filters combine: progressive intersection or concatenation."""
    AND = "and"
    OR = "or"


class ValueKind(str, Enum):
    INTEGER = "integer"
    TEXT = "text"
    OTHER = "other"


class FilterValue(BaseModel):
    """
    Tagged representation of the arbitrary JSON value carried by a filter.

    JSON numbers become ``INTEGER`` (narrowed to uint32 when matched), JSON
    strings become ``TEXT`` and everything else is ``OTHER``.
    """
    kind: ValueKind
    raw: Any = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_json(cls, raw: Any) -> "FilterValue":
        # bool is a subclass of int
        if isinstance(raw, bool):
            return cls(kind=ValueKind.OTHER, raw=raw)
        if isinstance(raw, int):
            return cls(kind=ValueKind.INTEGER, raw=raw)
        if isinstance(raw, float) and math.isfinite(raw):
            return cls(kind=ValueKind.INTEGER, raw=raw)
        if isinstance(raw, str):
            return cls(kind=ValueKind.TEXT, raw=raw)
        return cls(kind=ValueKind.OTHER, raw=raw)

    def as_uint32(self) -> int:
        """
        Narrow a numeric value to the width of the comment id fields.

        The fractional part is truncated and the result wraps modulo 2**32.

        Raises:
            ValueError: If the value is not numeric.
        """
        if self.kind is not ValueKind.INTEGER:
            raise ValueError(f"cannot narrow {self.kind.value} value to uint32")
        return int(self.raw) & UINT32_MAX


class Filter(BaseModel):
    """
    A single field/value predicate.

    ``field`` is kept as free text so that unknown names reach the filter
    engine and produce a descriptive error instead of a generic decode error.
    A missing or null field decodes as the empty name.
    """
    field: str = ""
    value: Any = None

    model_config = ConfigDict(frozen=True)

    @field_validator("field", mode="before")
    @classmethod
    def null_field_means_blank(cls, v: Optional[Any]) -> Any:
        return "" if v is None else v

    @property
    def typed_value(self) -> FilterValue:
        return FilterValue.from_json(self.value)


class GetCommentsByFilterRequest(BaseModel):
    """
    Request body for ``POST /filtered-comments``.
    """
    filters: List[Filter] = Field(default_factory=list)
    filter_relationship: FilterRelationship = Field(
        default=FilterRelationship.AND,
        alias="filterRelationship",
        description="How filters combine; defaults to 'and'.",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("filters", mode="before")
    @classmethod
    def null_filters_means_none(cls, v: Optional[Any]) -> Any:
        return [] if v is None else v

    @field_validator("filter_relationship", mode="before")
    @classmethod
    def default_blank_relationship(cls, v: Optional[Any]) -> Any:
        if v is None or v == "":
            return FilterRelationship.AND
        return v

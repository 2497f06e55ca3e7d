"""
Comment filter engine.

Applies an ordered list of field predicates to a comment collection. With
``and`` the filters narrow progressively: filter 0 runs against the full
input and every later filter runs against the survivors of the previous one.
With ``or`` every filter runs against the full input and the matches are
concatenated filter by filter, keeping duplicates.

An empty filter list matches nothing.
"""

from enum import Enum
from typing import Callable, List, Sequence

from loguru import logger

from posts_comments_api.models.dtos import (
    Comment,
    Filter,
    FilterRelationship,
    ValueKind,
)


class CommentFilterError(ValueError):
    """Base class for filter validation failures."""

    def __init__(self, message: str, field: str):
        self.message = message
        self.field = field
        super().__init__(self.message)


class UnknownFilterFieldError(CommentFilterError):
    def __init__(self, field: str):
        super().__init__(f'invalid field "{field}" is provided', field)


class FilterTypeMismatchError(CommentFilterError):
    def __init__(self, field: str):
        super().__init__(f'invalid data type for "{field}" is provided', field)


class CommentField(str, Enum):
    """Filterable comment fields, by wire name."""
    POST_ID = "postId"
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    BODY = "body"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self]

    @property
    def expected_kind(self) -> ValueKind:
        if self in (CommentField.POST_ID, CommentField.ID):
            return ValueKind.INTEGER
        return ValueKind.TEXT


_ATTRIBUTES = {
    CommentField.POST_ID: "post_id",
    CommentField.ID: "id",
    CommentField.NAME: "name",
    CommentField.EMAIL: "email",
    CommentField.BODY: "body",
}


def resolve_field(filter_: Filter) -> CommentField:
    """
    Validate a filter and return the comment field it targets.

    Args:
        filter_: Filter decoded from the request body.

    Returns:
        CommentField: The recognized field.

    Raises:
        UnknownFilterFieldError: If the field name is not filterable.
        FilterTypeMismatchError: If the value type does not suit the field.
    """
    try:
        field = CommentField(filter_.field)
    except ValueError:
        raise UnknownFilterFieldError(filter_.field) from None

    if filter_.typed_value.kind is not field.expected_kind:
        raise FilterTypeMismatchError(filter_.field)
    return field


def compile_filter(filter_: Filter) -> Callable[[Comment], bool]:
    """
    Validate a filter once and return a predicate over comments.

    Numeric fields compare after narrowing the value to uint32; text fields
    compare exactly (case-sensitive, no trimming).

    Raises:
        CommentFilterError: If the filter is invalid.
    """
    field = resolve_field(filter_)
    attribute = field.attribute
    value = filter_.typed_value
    expected = value.as_uint32() if field.expected_kind is ValueKind.INTEGER else value.raw

    def predicate(comment: Comment) -> bool:
        return getattr(comment, attribute) == expected

    return predicate


def match_comment(comment: Comment, filter_: Filter) -> bool:
    """Check a single comment against a single filter."""
    return compile_filter(filter_)(comment)


def _select(comments: Sequence[Comment], predicate: Callable[[Comment], bool]) -> List[Comment]:
    return [comment for comment in comments if predicate(comment)]


def filter_comments(
    comments: Sequence[Comment],
    filters: Sequence[Filter],
    relationship: FilterRelationship = FilterRelationship.AND,
) -> List[Comment]:
    """
    Filter comments by an ordered list of predicates.

    Args:
        comments: Full comment collection; never modified.
        filters: Predicates to apply, in order.
        relationship: ``and`` for progressive narrowing, ``or`` for
            concatenation of independent matches (duplicates kept).

    Returns:
        List[Comment]: A new list with the matching comments.

    Raises:
        CommentFilterError: If any filter names an unknown field or carries
            a value of the wrong type. Nothing is returned in that case.
    """
    # A bad filter anywhere fails the whole request
    predicates = [compile_filter(filter_) for filter_ in filters]

    if not predicates:
        return []

    if relationship is FilterRelationship.AND:
        candidates: List[Comment] = list(comments)
        for predicate in predicates:
            candidates = _select(candidates, predicate)
            if not candidates:
                break
        result = candidates
    else:
        result = []
        for predicate in predicates:
            result.extend(_select(comments, predicate))

    logger.debug(
        f"Filtered {len(comments)} comments with {len(filters)} filter(s) "
        f"({relationship.value}): {len(result)} match(es)"
    )
    return result

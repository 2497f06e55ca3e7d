from unittest.mock import patch

import pytest

from posts_comments_api.core.comment_filter import (
    CommentFilterError,
    FilterTypeMismatchError,
    UnknownFilterFieldError,
    compile_filter,
    filter_comments,
    match_comment,
    resolve_field,
)
from posts_comments_api.models.dtos import Comment, Filter, FilterRelationship


def ids(comments):
    return [comment.id for comment in comments]


def test_empty_filter_list_matches_nothing(comments):
    assert filter_comments(comments, [], FilterRelationship.AND) == []
    assert filter_comments(comments, [], FilterRelationship.OR) == []


def test_single_filter_keeps_original_order(comments):
    """Five comments on post 1 come back in input order."""
    result = filter_comments(comments, [Filter(field="postId", value=1)])

    assert ids(result) == [1, 2, 3, 4, 5]
    assert result == comments[:5]


def test_and_narrows_progressively(comments):
    filters = [Filter(field="postId", value=1), Filter(field="id", value=1)]

    result = filter_comments(comments, filters, FilterRelationship.AND)

    assert ids(result) == [1]


def test_and_with_disjoint_filters_is_empty(comments):
    filters = [Filter(field="postId", value=1), Filter(field="id", value=7)]

    assert filter_comments(comments, filters, FilterRelationship.AND) == []


def test_and_is_the_default_relationship(comments):
    filters = [Filter(field="postId", value=2), Filter(field="email", value="Dallas@ole.me")]

    assert ids(filter_comments(comments, filters)) == [7]


def test_or_concatenates_in_filter_order(comments):
    filters = [Filter(field="postId", value=2), Filter(field="postId", value=1)]

    result = filter_comments(comments, filters, FilterRelationship.OR)

    assert ids(result) == [6, 7, 8, 1, 2, 3, 4, 5]


def test_or_keeps_duplicates(comments):
    filters = [
        Filter(field="id", value=3),
        Filter(field="email", value="Nikita@garfield.biz"),
    ]

    result = filter_comments(comments, filters, FilterRelationship.OR)

    assert ids(result) == [3, 3]


def test_or_evaluates_each_filter_against_full_input(comments):
    filters = [Filter(field="id", value=6), Filter(field="postId", value=2)]

    assert ids(filter_comments(comments, filters, FilterRelationship.OR)) == [6, 6, 7, 8]


def test_filtering_does_not_mutate_input(comments):
    snapshot = list(comments)

    result = filter_comments(comments, [Filter(field="postId", value=1)])
    result.clear()

    assert comments == snapshot


def test_text_comparison_is_exact(comments):
    assert ids(filter_comments(comments, [Filter(field="email", value="Lew@alysha.tv")])) == [4]
    assert filter_comments(comments, [Filter(field="email", value="lew@alysha.tv")]) == []
    assert filter_comments(comments, [Filter(field="email", value=" Lew@alysha.tv")]) == []


def test_numeric_value_is_narrowed_to_uint32(comments):
    assert ids(filter_comments(comments, [Filter(field="id", value=2.9)])) == [2]
    assert ids(filter_comments(comments, [Filter(field="id", value=2**32 + 4)])) == [4]


def test_unknown_field_is_rejected(comments):
    with pytest.raises(UnknownFilterFieldError) as exc_info:
        filter_comments(comments, [Filter(field="unknown", value=1)])

    assert exc_info.value.field == "unknown"
    assert str(exc_info.value) == 'invalid field "unknown" is provided'


def test_invalid_filter_after_valid_one_returns_no_partial_result(comments):
    filters = [Filter(field="postId", value=1), Filter(field="unknown", value=1)]

    with pytest.raises(CommentFilterError):
        filter_comments(comments, filters, FilterRelationship.OR)


def test_invalid_filter_rejected_even_without_comments():
    with pytest.raises(UnknownFilterFieldError):
        filter_comments([], [Filter(field="userId", value=1)])


@pytest.mark.parametrize(
    "field, value",
    [
        ("postId", "abc"),
        ("id", "1"),
        ("postId", True),
        ("id", None),
        ("name", 1),
        ("email", ["a@example.com"]),
        ("body", {"text": "x"}),
    ],
)
def test_type_mismatch_is_rejected(comments, field, value):
    with pytest.raises(FilterTypeMismatchError) as exc_info:
        filter_comments(comments, [Filter(field=field, value=value)])

    assert str(exc_info.value) == f'invalid data type for "{field}" is provided'


def test_match_comment_single_predicate():
    comment = Comment(id=10, post_id=3, name="n", email="e@example.com", body="hello")

    assert match_comment(comment, Filter(field="body", value="hello"))
    assert not match_comment(comment, Filter(field="body", value="Hello"))
    assert match_comment(comment, Filter(field="postId", value=3))


def test_each_filter_is_resolved_once(comments):
    filters = [Filter(field="postId", value=1), Filter(field="name", value="alias odio sit")]

    with patch("posts_comments_api.core.comment_filter.resolve_field", wraps=resolve_field) as mock_resolve:
        result = filter_comments(comments, filters, FilterRelationship.OR)

    assert ids(result) == [1, 2, 3, 4, 5, 4]
    assert mock_resolve.call_count == len(filters)


def test_compile_filter_rejects_invalid_filter():
    with pytest.raises(FilterTypeMismatchError):
        compile_filter(Filter(field="name", value=3))

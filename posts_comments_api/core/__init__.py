"""
Core components for the posts & comments API.
"""

from .comment_filter import (
    CommentField,
    CommentFilterError,
    FilterTypeMismatchError,
    UnknownFilterFieldError,
    compile_filter,
    filter_comments,
    match_comment,
)
from .top_posts import count_comments_by_post, rank_posts_by_comments

__all__ = [
    "CommentField",
    "CommentFilterError",
    "FilterTypeMismatchError",
    "UnknownFilterFieldError",
    "compile_filter",
    "filter_comments",
    "match_comment",
    "count_comments_by_post",
    "rank_posts_by_comments",
]

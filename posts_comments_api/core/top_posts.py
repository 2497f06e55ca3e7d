"""
Top-posts aggregation.

Joins the post collection with the comment collection and ranks posts by how
many comments reference them.
"""

from collections import Counter
from typing import Dict, List, Sequence

from posts_comments_api.models.dtos import Comment, Post, TopPost


def count_comments_by_post(comments: Sequence[Comment]) -> Dict[int, int]:
    """Map each referenced post id to the number of comments pointing at it."""
    return dict(Counter(comment.post_id for comment in comments))


def rank_posts_by_comments(posts: Sequence[Post], comments: Sequence[Comment]) -> List[TopPost]:
    """
    Rank every post by its comment count, highest first.

    Posts without comments are kept with a count of zero. The sort is stable,
    so posts with equal counts keep their upstream order.

    Args:
        posts: Full post collection.
        comments: Full comment collection.

    Returns:
        List[TopPost]: One entry per post, sorted by descending count.
    """
    counts = count_comments_by_post(comments)

    top_posts = [
        TopPost(
            post_id=post.id,
            post_title=post.title,
            post_body=post.body,
            total_number_of_comments=counts.get(post.id, 0),
        )
        for post in posts
    ]
    return sorted(top_posts, key=lambda top_post: top_post.total_number_of_comments, reverse=True)

"""Shared fixtures for the posts & comments API tests."""

from typing import List
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from posts_comments_api.api.dependencies import get_upstream_client
from posts_comments_api.api.main import app
from posts_comments_api.integrations.upstream_client import UpstreamClient
from posts_comments_api.models.dtos import Comment, Post


def make_comment(id: int, post_id: int, name: str = "name", email: str = "a@example.com", body: str = "body") -> Comment:
    return Comment(id=id, post_id=post_id, name=name, email=email, body=body)


@pytest.fixture
def comments() -> List[Comment]:
    """Five comments on post 1 followed by three on post 2."""
    return [
        make_comment(1, 1, name="id labore ex et quam laborum", email="Eliseo@gardner.biz"),
        make_comment(2, 1, name="quo vero reiciendis velit", email="Jayne_Kuhic@sydney.com"),
        make_comment(3, 1, name="odio adipisci rerum", email="Nikita@garfield.biz"),
        make_comment(4, 1, name="alias odio sit", email="Lew@alysha.tv"),
        make_comment(5, 1, name="vero eaque aliquid", email="Hayden@althea.biz"),
        make_comment(6, 2, name="et fugit eligendi", email="Presley.Mueller@myrl.com"),
        make_comment(7, 2, name="repellat consequatur", email="Dallas@ole.me"),
        make_comment(8, 2, name="et omnis dolorem", email="Mallory_Kunze@marie.org"),
    ]


@pytest.fixture
def posts() -> List[Post]:
    return [
        Post(id=1, user_id=1, title="sunt aut facere", body="quia et suscipit"),
        Post(id=2, user_id=1, title="qui est esse", body="est rerum tempore"),
        Post(id=3, user_id=1, title="ea molestias quasi", body="et iusto sed quo"),
    ]


@pytest.fixture
def upstream_client(comments, posts) -> AsyncMock:
    """Upstream client double returning the sample collections."""
    client = AsyncMock(spec=UpstreamClient)
    client.get_comments.return_value = comments
    client.get_posts.return_value = posts
    return client


@pytest.fixture
def api_client(upstream_client):
    """TestClient with the upstream client dependency overridden."""
    app.dependency_overrides[get_upstream_client] = lambda: upstream_client
    yield TestClient(app)
    app.dependency_overrides.clear()

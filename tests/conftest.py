"""
Shared fixtures for the blog platform tests.
"""
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from blog.models import Blog, Comment

User = get_user_model()


@pytest.fixture
def api_client():
    """An unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """The blog author."""
    return User.objects.create_user(
        email="author@example.com",
        name="Ada Author",
        password="testpass123",
    )


@pytest.fixture
def other_user(db):
    """A second user who reads, likes and comments."""
    return User.objects.create_user(
        email="reader@example.com",
        name="Rita Reader",
        password="testpass123",
    )


@pytest.fixture
def auth_client(user):
    """API client authenticated as ``user``."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_client(other_user):
    """API client authenticated as ``other_user``."""
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def blog(user):
    """A published blog written by ``user``."""
    return Blog.objects.create(
        author=user,
        title="Hello, World! 2024",
        content="# Heading\n\nSome *markdown* body.",
        excerpt="Intro",
        published=True,
    )


@pytest.fixture
def comment(blog, other_user):
    """A comment by ``other_user`` on ``blog``."""
    return Comment.objects.create(blog=blog, author=other_user, content="Nice post!")

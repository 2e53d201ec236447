"""
Tests for the ownership gate.
"""
from django.contrib.auth.models import AnonymousUser

from blog.permissions import is_owner


class TestIsOwner:
    def test_author_owns_blog(self, blog, user):
        assert is_owner(user, blog)

    def test_other_user_does_not_own_blog(self, blog, other_user):
        assert not is_owner(other_user, blog)

    def test_anonymous_owns_nothing(self, blog):
        assert not is_owner(AnonymousUser(), blog)

    def test_comment_author_owns_comment(self, comment, other_user, user):
        assert is_owner(other_user, comment)
        assert not is_owner(user, comment)

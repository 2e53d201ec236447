"""
Tests for the API error format.
"""
from unittest import mock

from django.db import DatabaseError


class TestInternalErrors:
    def test_storage_error_is_hidden(self, api_client, blog, caplog):
        with mock.patch("blog.views.blog_likes", side_effect=DatabaseError("disk I/O")):
            response = api_client.get(f"/api/blogs/{blog.slug}/likes/")

        assert response.status_code == 500
        assert response.data == {"error": "Internal server error"}
        assert "disk I/O" in caplog.text

    def test_debug_includes_details(self, api_client, blog, settings):
        settings.DEBUG = True

        with mock.patch("blog.views.blog_likes", side_effect=DatabaseError("disk I/O")):
            response = api_client.get(f"/api/blogs/{blog.slug}/likes/")

        assert response.status_code == 500
        assert response.data == {"error": "Internal server error", "details": "disk I/O"}


class TestMethodNotAllowed:
    def test_unsupported_method(self, auth_client, blog):
        response = auth_client.post(f"/api/blogs/{blog.slug}/", {}, format="json")

        assert response.status_code == 405
        assert response.data == {"error": "Method not allowed"}

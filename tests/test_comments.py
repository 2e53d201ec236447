"""
Tests for comment endpoints.
"""
from blog.models import Comment


def comments_url(blog):
    return f"/api/blogs/{blog.slug}/comments/"


class TestBlogComments:
    def test_list_newest_first(self, api_client, blog, user, comment):
        Comment.objects.create(blog=blog, author=user, content="Thanks!")

        response = api_client.get(comments_url(blog))

        assert response.status_code == 200
        assert [c["content"] for c in response.data["comments"]] == [
            "Thanks!",
            "Nice post!",
        ]
        assert response.data["comments"][1]["author"]["name"] == "Rita Reader"

    def test_list_unknown_blog(self, api_client, db):
        response = api_client.get("/api/blogs/nope-1/comments/")

        assert response.status_code == 404

    def test_create(self, other_client, blog, other_user):
        response = other_client.post(
            comments_url(blog), {"content": "Great read"}, format="json"
        )

        assert response.status_code == 201
        assert response.data["comment"]["content"] == "Great read"
        assert response.data["comment"]["author"]["id"] == other_user.id
        assert Comment.objects.get().blog == blog

    def test_create_requires_login(self, api_client, blog):
        response = api_client.post(comments_url(blog), {"content": "hi"}, format="json")

        assert response.status_code == 401
        assert not Comment.objects.exists()

    def test_empty_content_is_rejected(self, other_client, blog):
        response = other_client.post(comments_url(blog), {"content": ""}, format="json")

        assert response.status_code == 400
        assert "content" in response.data["error"]


class TestCommentDetail:
    def test_owner_can_edit(self, other_client, comment):
        response = other_client.put(
            f"/api/comments/{comment.pk}/", {"content": "Edited"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["comment"]["content"] == "Edited"
        comment.refresh_from_db()
        assert comment.content == "Edited"

    def test_edit_needs_content(self, other_client, comment):
        response = other_client.put(f"/api/comments/{comment.pk}/", {}, format="json")

        assert response.status_code == 400

    def test_blog_author_cannot_edit_others_comment(self, auth_client, comment):
        response = auth_client.put(
            f"/api/comments/{comment.pk}/", {"content": "Censored"}, format="json"
        )

        assert response.status_code == 403
        assert response.data == {"error": "Forbidden"}
        comment.refresh_from_db()
        assert comment.content == "Nice post!"

    def test_anonymous_cannot_edit(self, api_client, comment):
        response = api_client.put(
            f"/api/comments/{comment.pk}/", {"content": "x"}, format="json"
        )

        assert response.status_code == 401

    def test_owner_can_delete(self, other_client, comment):
        response = other_client.delete(f"/api/comments/{comment.pk}/")

        assert response.status_code == 200
        assert response.data == {"message": "Comment deleted successfully"}
        assert not Comment.objects.exists()

    def test_non_owner_cannot_delete(self, auth_client, comment):
        response = auth_client.delete(f"/api/comments/{comment.pk}/")

        assert response.status_code == 403
        assert Comment.objects.filter(pk=comment.pk).exists()

    def test_missing_comment(self, other_client, db):
        response = other_client.delete("/api/comments/9999/")

        assert response.status_code == 404

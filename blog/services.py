import logging
from dataclasses import dataclass
from typing import Optional

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotAuthenticated, NotFound

from .models import Blog, Like
from .notifications import notify_like

logger = logging.getLogger(__name__)


@dataclass
class LikeToggleResult:
    liked: bool
    like: Optional[Like] = None
    notified: bool = False


def get_blog_or_404(slug, queryset=None):
    queryset = queryset if queryset is not None else Blog.objects.all()
    try:
        return queryset.get(slug=slug)
    except Blog.DoesNotExist:
        raise NotFound("Blog not found")


def toggle_like(blog_slug, user):
    """
    Flip ``user``'s like on the blog identified by ``blog_slug``.

    An existing like is deleted and nothing else happens. Otherwise a like
    is created and, once the transaction commits, the author is notified
    (see :func:`blog.notifications.notify_like`).

    The ``(blog, author)`` unique constraint is the only guard against a
    concurrent toggle from the same user. When the insert loses that race
    the other request's like is removed instead, exactly as a second toggle
    would have done.
    """
    if user is None or not user.is_authenticated:
        raise NotAuthenticated()

    blog = get_blog_or_404(blog_slug, Blog.objects.select_related("author"))

    with transaction.atomic():
        deleted, _ = Like.objects.filter(blog=blog, author=user).delete()
        if deleted:
            logger.info(f"User {user.id} unliked blog {blog.id}")
            return LikeToggleResult(liked=False)

        try:
            with transaction.atomic():
                like = Like.objects.create(blog=blog, author=user)
        except IntegrityError:
            logger.warning(
                f"Concurrent like on blog {blog.id} by user {user.id}, retrying as unlike"
            )
            Like.objects.filter(blog=blog, author=user).delete()
            return LikeToggleResult(liked=False)

        logger.info(f"User {user.id} liked blog {blog.id}")
        notified = notify_like(blog, user)

    return LikeToggleResult(liked=True, like=like, notified=notified)


def blog_likes(blog_slug, user=None):
    """Return ``(blog, likes, is_liked)`` for the blog identified by ``blog_slug``."""
    blog = get_blog_or_404(blog_slug)
    likes = list(blog.likes.select_related("author").order_by("created_at"))
    is_liked = bool(
        user
        and user.is_authenticated
        and any(like.author_id == user.id for like in likes)
    )
    return blog, likes, is_liked

import logging

from django.db import transaction

from .tasks import send_like_notification_email

logger = logging.getLogger(__name__)


def should_notify(blog, liker):
    """A like notifies the author unless it is a self-like or the author has no email."""
    return blog.author_id != liker.id and bool(blog.author.email)


def _enqueue(kwargs):
    try:
        send_like_notification_email.delay(**kwargs)
    except Exception as e:
        logger.error(
            f"Could not queue like notification for blog {kwargs['blog_slug']}: {str(e)}"
        )


def notify_like(blog, liker):
    """
    Queue a like notification for the author of ``blog``.

    The message is handed to Celery only after the surrounding transaction
    commits, so a rolled-back like never sends mail. Returns True when a
    notification was scheduled.
    """
    if not should_notify(blog, liker):
        return False

    payload = {
        "blog_title": blog.title,
        "blog_slug": blog.slug,
        "liker_name": getattr(liker, "display_name", "") or "Someone",
        "author_email": blog.author.email,
    }
    transaction.on_commit(lambda: _enqueue(payload))
    return True

import logging

from celery import shared_task

from .emails import build_like_notification

logger = logging.getLogger(__name__)


@shared_task(ignore_result=True)
def send_like_notification_email(blog_title, blog_slug, liker_name, author_email):
    """
    Best-effort delivery of a like notification.

    Returns True once the message is handed to the mail transport. Failures
    are logged and reported as False; the task never raises and is never
    retried.
    """
    try:
        build_like_notification(blog_title, blog_slug, liker_name, author_email).send()
    except Exception as e:
        logger.error(
            f"Failed to send like notification for blog {blog_slug}: {str(e)}",
            exc_info=True,
        )
        return False

    logger.info(f"Like notification sent for blog {blog_slug}")
    return True

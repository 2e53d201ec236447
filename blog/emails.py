from datetime import datetime

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string


def blog_url(slug):
    return f"{settings.BASE_URL}/blog/{slug}"


def build_like_notification(blog_title, blog_slug, liker_name, author_email):
    """Return the like notification message, ready to send."""
    link = blog_url(blog_slug)
    subject = f"Someone liked your blog: {blog_title}"
    html_content = render_to_string(
        "emails/like_notification.html",
        {
            "liker_name": liker_name,
            "blog_title": blog_title,
            "blog_url": link,
            "year": datetime.now().year,
        },
    )
    text_content = f'{liker_name} just liked your blog post "{blog_title}".\n\n{link}'

    msg = EmailMultiAlternatives(
        subject, text_content, settings.DEFAULT_FROM_EMAIL, [author_email]
    )
    msg.attach_alternative(html_content, "text/html")
    return msg

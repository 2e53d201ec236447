# blog/urls.py
from django.urls import path, re_path

from .views import (
    BlogCommentsView,
    BlogDetailView,
    BlogLikesView,
    BlogListCreateView,
    CommentDetailView,
    ImageUploadView,
)

urlpatterns = [
    path("blogs/", BlogListCreateView.as_view(), name="blog-list-create"),
    path("blogs/<str:slug>/", BlogDetailView.as_view(), name="blog-detail"),
    re_path(
        r"^blogs/(?P<slug>[^/]+)/likes/?$", BlogLikesView.as_view(), name="blog-likes"
    ),
    path(
        "blogs/<str:slug>/comments/", BlogCommentsView.as_view(), name="blog-comments"
    ),
    path("comments/<int:pk>/", CommentDetailView.as_view(), name="comment-detail"),
    path("upload/", ImageUploadView.as_view(), name="image-upload"),
]

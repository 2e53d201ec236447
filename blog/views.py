import logging
import secrets
import time

from django.core.files.storage import default_storage
from django.db.models import Count
from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions, status
from rest_framework.exceptions import ValidationError
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from .filters import BlogFilter
from .models import Blog, Comment
from .pagination import BlogPagination
from .permissions import IsOwnerOrReadOnly
from .serializers import (
    BlogSerializer,
    CommentSerializer,
    ImageUploadSerializer,
    LikeSerializer,
)
from .services import blog_likes, get_blog_or_404, toggle_like

logger = logging.getLogger(__name__)


def annotated_blogs():
    return Blog.objects.select_related("author").annotate(
        likes_count=Count("likes", distinct=True),
        comments_count=Count("comments", distinct=True),
    )


# Blogs: anyone can read, any signed-in user can write
class BlogListCreateView(generics.ListCreateAPIView):
    serializer_class = BlogSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    pagination_class = BlogPagination
    filterset_class = BlogFilter

    def get_queryset(self):
        return annotated_blogs().order_by("-created_at", "-id")

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        blog = serializer.save(author=request.user)
        logger.info(f"User {request.user.id} created blog {blog.slug}")
        return Response({"blog": serializer.data}, status=status.HTTP_201_CREATED)


# Blog details: anyone can view, only the author can edit/delete
class BlogDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = BlogSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsOwnerOrReadOnly]
    lookup_field = "slug"

    def get_queryset(self):
        return annotated_blogs()

    def get_object(self):
        queryset = self.get_queryset()
        blog = get_blog_or_404(self.kwargs["slug"], queryset)
        self.check_object_permissions(self.request, blog)
        return blog

    def retrieve(self, request, *args, **kwargs):
        return Response({"blog": self.get_serializer(self.get_object()).data})

    def update(self, request, *args, **kwargs):
        # PUT behaves like PATCH: every field is optional.
        blog = self.get_object()
        serializer = self.get_serializer(blog, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        old_slug = blog.slug
        blog = serializer.save()
        if blog.slug != old_slug:
            logger.info(f"Blog {blog.id} re-slugged from {old_slug} to {blog.slug}")
        return Response({"blog": serializer.data})

    def destroy(self, request, *args, **kwargs):
        blog = self.get_object()
        logger.info(f"User {request.user.id} deleted blog {blog.slug}")
        blog.delete()
        return Response(
            {"message": "Blog deleted successfully"}, status=status.HTTP_200_OK
        )


# Likes: listing is public, toggling requires a signed-in user
class BlogLikesView(APIView):
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request, slug):
        _, likes, is_liked = blog_likes(slug, request.user)
        return Response(
            {
                "likes": LikeSerializer(likes, many=True).data,
                "count": len(likes),
                "isLiked": is_liked,
            }
        )

    def post(self, request, slug):
        result = toggle_like(slug, request.user)
        if not result.liked:
            return Response(
                {"message": "Like removed", "liked": False}, status=status.HTTP_200_OK
            )
        return Response(
            {"like": LikeSerializer(result.like).data, "liked": True},
            status=status.HTTP_201_CREATED,
        )


class BlogCommentsView(generics.ListCreateAPIView):
    serializer_class = CommentSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    pagination_class = None

    def get_blog(self):
        return get_blog_or_404(self.kwargs["slug"])

    def get_queryset(self):
        return (
            Comment.objects.filter(blog=self.get_blog())
            .select_related("author")
            .order_by("-created_at", "-id")
        )

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({"comments": serializer.data})

    def create(self, request, *args, **kwargs):
        blog = self.get_blog()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save(blog=blog, author=request.user)
        return Response({"comment": serializer.data}, status=status.HTTP_201_CREATED)


class CommentDetailView(generics.GenericAPIView):
    serializer_class = CommentSerializer
    permission_classes = [permissions.IsAuthenticated, IsOwnerOrReadOnly]
    queryset = Comment.objects.select_related("author", "blog")

    def get_object(self):
        comment = get_object_or_404(self.get_queryset(), pk=self.kwargs["pk"])
        self.check_object_permissions(self.request, comment)
        return comment

    def put(self, request, pk):
        comment = self.get_object()
        serializer = self.get_serializer(
            comment, data={"content": request.data.get("content", "")}, partial=True
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"comment": serializer.data})

    def patch(self, request, pk):
        return self.put(request, pk)

    def delete(self, request, pk):
        self.get_object().delete()
        return Response(
            {"message": "Comment deleted successfully"}, status=status.HTTP_200_OK
        )


class ImageUploadView(APIView):
    permission_classes = [permissions.IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        files = request.FILES
        uploaded = files.get("file") or files.get("image")
        if uploaded is None and files:
            uploaded = next(iter(files.values()))
        if uploaded is None:
            raise ValidationError("No file uploaded")

        serializer = ImageUploadSerializer(data={"file": uploaded})
        serializer.is_valid(raise_exception=True)

        image = serializer.validated_data["file"]
        ext = ImageUploadSerializer.extension_for(image)
        filename = f"uploads/{time.time_ns() // 1_000_000}-{secrets.token_hex(4)}{ext}"

        image.seek(0)
        saved_name = default_storage.save(filename, image)
        logger.info(f"User {request.user.id} uploaded {saved_name}")

        return Response({"url": default_storage.url(saved_name)}, status=status.HTTP_200_OK)

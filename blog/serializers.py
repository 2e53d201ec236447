# blog/serializers.py
import os

from django import forms
from django.conf import settings
from rest_framework import serializers

from users.serializers import AuthorSerializer

from .models import Blog, Comment, Like
from .rendering import render_markdown
from .slugs import mint_slug


class CommentSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)
    content = serializers.CharField(allow_blank=False, trim_whitespace=True)

    class Meta:
        model = Comment
        fields = ["id", "blog", "author", "content", "created_at", "updated_at"]
        read_only_fields = ["blog", "author", "created_at", "updated_at"]


class LikeSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)

    class Meta:
        model = Like
        fields = ["id", "blog", "author", "created_at"]
        read_only_fields = fields


class BlogSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)
    title = serializers.CharField(max_length=255, allow_blank=False)
    content = serializers.CharField(allow_blank=False, trim_whitespace=False)
    excerpt = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    published = serializers.BooleanField(required=False)
    content_html = serializers.SerializerMethodField()
    likes_count = serializers.SerializerMethodField()
    comments_count = serializers.SerializerMethodField()

    class Meta:
        model = Blog
        fields = [
            "id",
            "author",
            "title",
            "slug",
            "content",
            "content_html",
            "excerpt",
            "published",
            "likes_count",
            "comments_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["slug", "author", "created_at", "updated_at"]

    def get_content_html(self, obj):
        return render_markdown(obj.content)

    def get_likes_count(self, obj):
        count = getattr(obj, "likes_count", None)
        return count if count is not None else obj.likes.count()

    def get_comments_count(self, obj):
        count = getattr(obj, "comments_count", None)
        return count if count is not None else obj.comments.count()

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError("Title cannot be blank.")
        return value

    def create(self, validated_data):
        validated_data["slug"] = mint_slug(validated_data["title"])
        validated_data.setdefault("published", False)
        return Blog.objects.create(**validated_data)

    def update(self, instance, validated_data):
        # The slug only changes with the title, so existing links keep working.
        new_title = validated_data.get("title")
        if new_title and new_title != instance.title:
            instance.slug = mint_slug(new_title)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        return instance


class AnyExtensionImageField(forms.ImageField):
    # Pillow still verifies the content; files without an extension are stored as .jpg.
    default_validators = []


class ImageUploadSerializer(serializers.Serializer):
    file = serializers.ImageField(_DjangoImageField=AnyExtensionImageField)

    def validate_file(self, value):
        if value.size > settings.UPLOAD_MAX_SIZE:
            raise serializers.ValidationError(
                f"File exceeds the {settings.UPLOAD_MAX_SIZE // (1024 * 1024)}MB limit."
            )
        return value

    @staticmethod
    def extension_for(uploaded):
        name = uploaded.name or "image"
        return os.path.splitext(name)[1].lower() or ".jpg"

# blog/admin.py
from django.contrib import admin

from .models import Blog, Comment, Like


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    readonly_fields = ("author", "content", "created_at")
    can_delete = True


class LikeInline(admin.TabularInline):
    model = Like
    extra = 0
    readonly_fields = ("author", "created_at")
    can_delete = True


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ("title", "author", "published", "created_at")
    list_filter = ("published",)
    search_fields = ("title", "content", "author__email", "author__name")
    readonly_fields = ("slug", "created_at", "updated_at")
    inlines = [CommentInline, LikeInline]
    ordering = ("-created_at",)

    fieldsets = (
        ("Post Info", {"fields": ("title", "slug", "author", "excerpt", "published")}),
        ("Content", {"fields": ("content",)}),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("author", "blog", "content", "created_at")
    list_filter = ("created_at",)
    search_fields = ("content", "author__email", "blog__title")


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    list_display = ("author", "blog", "created_at")
    list_filter = ("created_at",)
    search_fields = ("author__email", "blog__title")

from rest_framework import permissions


def is_owner(user, obj):
    """True when ``user`` authored ``obj`` (a Blog or a Comment)."""
    return bool(user and user.is_authenticated and obj.author_id == user.id)


# Anyone can read; only the author may update or delete.
class IsOwnerOrReadOnly(permissions.BasePermission):
    message = "Forbidden"

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_owner(request.user, obj)

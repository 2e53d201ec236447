import logging

from rest_framework import generics, permissions, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from .broadcast import broadcast_chat_message
from .models import ChatMessage
from .serializers import ChatMessageSerializer

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50
MAX_HISTORY_LIMIT = 200


class ChatMessageListCreateView(generics.ListCreateAPIView):
    serializer_class = ChatMessageSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    pagination_class = None

    def get_limit(self):
        raw = self.request.query_params.get("limit", DEFAULT_HISTORY_LIMIT)
        try:
            limit = int(raw)
        except (TypeError, ValueError):
            raise ValidationError({"limit": "Must be a positive integer."})
        if limit < 1:
            raise ValidationError({"limit": "Must be a positive integer."})
        return min(limit, MAX_HISTORY_LIMIT)

    def get_queryset(self):
        return ChatMessage.objects.select_related("author")

    def list(self, request, *args, **kwargs):
        latest = list(self.get_queryset().order_by("-created_at", "-id")[: self.get_limit()])
        latest.reverse()
        return Response({"messages": self.get_serializer(latest, many=True).data})

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = serializer.save(author=request.user)
        logger.info(f"User {request.user.id} posted chat message {message.id}")

        broadcast_chat_message(dict(serializer.data))

        return Response({"message": serializer.data}, status=status.HTTP_201_CREATED)

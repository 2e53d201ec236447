from rest_framework import serializers

from users.serializers import AuthorSerializer

from .models import ChatMessage


class ChatMessageSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)
    content = serializers.CharField(allow_blank=False)

    class Meta:
        model = ChatMessage
        fields = ["id", "author", "content", "created_at"]
        read_only_fields = ["id", "author", "created_at"]

"""
Tests for the chat room API and websocket consumer.
"""
from unittest import mock

import pytest
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator

from communications.broadcast import CHAT_GROUP, broadcast_chat_message
from communications.consumers import ChatConsumer
from communications.models import ChatMessage


class TestChatHistory:
    def test_latest_messages_oldest_first(self, api_client, user):
        for i in range(5):
            ChatMessage.objects.create(author=user, content=f"message {i}")

        response = api_client.get("/api/chat/", {"limit": 3})

        assert response.status_code == 200
        assert [m["content"] for m in response.data["messages"]] == [
            "message 2",
            "message 3",
            "message 4",
        ]
        assert response.data["messages"][0]["author"]["name"] == "Ada Author"

    def test_default_limit_is_fifty(self, api_client, user):
        ChatMessage.objects.bulk_create(
            ChatMessage(author=user, content=f"m{i}") for i in range(60)
        )

        response = api_client.get("/api/chat/")

        assert len(response.data["messages"]) == 50

    def test_bad_limit(self, api_client, db):
        response = api_client.get("/api/chat/", {"limit": "lots"})

        assert response.status_code == 400


class TestPostChatMessage:
    def test_requires_login(self, api_client, db):
        response = api_client.post("/api/chat/", {"content": "hi"}, format="json")

        assert response.status_code == 401
        assert not ChatMessage.objects.exists()

    def test_empty_content(self, auth_client):
        response = auth_client.post("/api/chat/", {"content": ""}, format="json")

        assert response.status_code == 400

    def test_post_saves_and_broadcasts(self, auth_client, user):
        with mock.patch("communications.views.broadcast_chat_message") as broadcast:
            response = auth_client.post("/api/chat/", {"content": "hello"}, format="json")

        assert response.status_code == 201
        assert response.data["message"]["content"] == "hello"
        assert ChatMessage.objects.get().author == user
        broadcast.assert_called_once()
        assert broadcast.call_args.args[0]["content"] == "hello"

    def test_broadcast_failure_is_not_an_error(self, auth_client):
        with mock.patch(
            "communications.broadcast.get_channel_layer"
        ) as get_layer:
            get_layer.return_value.group_send = mock.AsyncMock(
                side_effect=RuntimeError("layer down")
            )
            response = auth_client.post("/api/chat/", {"content": "hello"}, format="json")

        assert response.status_code == 201
        assert ChatMessage.objects.count() == 1


class TestBroadcast:
    def test_sends_to_chat_group(self):
        layer = mock.Mock()
        layer.group_send = mock.AsyncMock()
        with mock.patch("communications.broadcast.get_channel_layer", return_value=layer):
            assert broadcast_chat_message({"content": "hi"}) is True

        layer.group_send.assert_awaited_once_with(
            CHAT_GROUP, {"type": "chat.message", "message": {"content": "hi"}}
        )

    def test_no_layer(self):
        with mock.patch("communications.broadcast.get_channel_layer", return_value=None):
            assert broadcast_chat_message({"content": "hi"}) is False


class TestChatConsumer:
    @pytest.mark.django_db(transaction=True)
    def test_relays_group_messages(self):
        async def scenario():
            communicator = WebsocketCommunicator(ChatConsumer.as_asgi(), "/ws/chat/")
            connected, _ = await communicator.connect()
            assert connected

            await get_channel_layer().group_send(
                CHAT_GROUP,
                {"type": "chat.message", "message": {"id": 1, "content": "hey"}},
            )
            received = await communicator.receive_json_from()

            await communicator.send_json_to({"type": "ping"})
            pong = await communicator.receive_json_from()

            await communicator.disconnect()
            return received, pong

        received, pong = async_to_sync(scenario)()

        assert received == {"type": "message", "message": {"id": 1, "content": "hey"}}
        assert pong == {"type": "pong"}

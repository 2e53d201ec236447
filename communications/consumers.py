import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from .broadcast import CHAT_GROUP

logger = logging.getLogger(__name__)


class ChatConsumer(AsyncJsonWebsocketConsumer):
    """
    Relays chat broadcasts to a connected socket.

    Messages are created through the REST endpoint; this consumer only
    forwards whatever is published to the chat group.
    """

    async def connect(self):
        await self.channel_layer.group_add(CHAT_GROUP, self.channel_name)
        await self.accept()
        user = self.scope.get("user")
        logger.debug(
            f"Chat socket connected for {getattr(user, 'pk', None) or 'anonymous'}"
        )

    async def disconnect(self, code):
        await self.channel_layer.group_discard(CHAT_GROUP, self.channel_name)

    async def receive_json(self, content, **kwargs):
        # Clients only listen; posting goes through the REST API.
        if content.get("type") == "ping":
            await self.send_json({"type": "pong"})

    async def chat_message(self, event):
        await self.send_json({"type": "message", "message": event["message"]})

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

logger = logging.getLogger(__name__)

CHAT_GROUP = "chat"


def broadcast_chat_message(message_data):
    """
    Push a serialized chat message to every connected chat socket.

    Delivery is best-effort: a missing or failing channel layer is logged
    and reported as False.
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        logger.warning("No channel layer configured, chat message not broadcast")
        return False

    try:
        async_to_sync(channel_layer.group_send)(
            CHAT_GROUP, {"type": "chat.message", "message": message_data}
        )
    except Exception as e:
        logger.error(f"Chat broadcast failed: {str(e)}")
        return False
    return True

"""Message listener — turns command messages into completion replies.

Platform-agnostic: the Discord adapter converts each event into an
IncomingMessage and hands it here, and replies go out through a
NotificationPort.
"""

import sys

from groq_bridge.domain.commands import parse_command
from groq_bridge.ports.inbound import IncomingMessage
from groq_bridge.ports.outbound import CompletionPort, NotificationPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class MessageListener:
    """Handles one message-create event at a time. Holds no per-message state."""

    def __init__(self, completion: CompletionPort, notification: NotificationPort):
        self._completion = completion
        self._notification = notification

    async def handle(self, message: IncomingMessage) -> bool:
        """Reply to ``message`` if it is a command from a human.

        Returns True when a reply was sent.
        """
        # Bots never trigger replies, ourselves included
        if message.is_bot:
            return False

        request = parse_command(message.content)
        if request is None:
            return False

        _log(f"[listener] {request.command.name} from {message.author_name} in ch={message.channel_id}")
        result = await self._completion.get_completion(request.prompt)
        if not result.success:
            _log(f"[listener] completion failed: {result.error.name} ({result.detail})")

        await self._notification.send(message.channel_id, result.display_text())
        return True

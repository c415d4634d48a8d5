"""Discord adapter — bridges discord.Client to MessageListener.

DiscordBotAdapter converts each discord.Message to an IncomingMessage and
hands it to the listener; DiscordNotificationAdapter sends the reply.
"""

import sys

import discord

from groq_bridge.domain.listener import MessageListener
from groq_bridge.ports.inbound import IncomingMessage
from groq_bridge.ports.outbound import CompletionPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def bot_intents() -> discord.Intents:
    """Minimum intents to read message text in guild channels."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class DiscordNotificationAdapter:
    """NotificationPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def send(self, channel_id: int, text: str) -> None:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            channel = await self._client.fetch_channel(channel_id)
        # One message, no splitting: Discord rejects replies over its length limit
        await channel.send(text)


class DiscordBotAdapter(discord.Client):
    """Thin Discord client that delegates every message to MessageListener."""

    def __init__(self, completion: CompletionPort, **discord_kwargs):
        super().__init__(intents=bot_intents(), **discord_kwargs)
        self.listener = MessageListener(completion, DiscordNotificationAdapter(self))

    @staticmethod
    def _to_incoming(message: discord.Message) -> IncomingMessage:
        return IncomingMessage(
            content=message.content,
            channel_id=message.channel.id,
            author_name=str(message.author),
            author_id=message.author.id,
            is_bot=message.author.bot,
        )

    async def on_ready(self):
        _log(f"[groq-bridge] logged in as {self.user}")
        _log("[groq-bridge] Bot is now running. Press CTRL+C to exit.")

    async def on_message(self, message: discord.Message):
        await self.listener.handle(self._to_incoming(message))

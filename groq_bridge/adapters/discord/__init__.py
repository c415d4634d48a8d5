"""Discord adapters — client, reply sender and launcher."""

from groq_bridge.adapters.discord.adapter import DiscordBotAdapter, DiscordNotificationAdapter

__all__ = [
    "DiscordBotAdapter",
    "DiscordNotificationAdapter",
]

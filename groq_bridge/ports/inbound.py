"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass


@dataclass
class IncomingMessage:
    """Chat message as seen by the listener, independent of Discord types."""

    content: str
    channel_id: int
    author_name: str
    author_id: int
    is_bot: bool

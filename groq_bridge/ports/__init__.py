"""Ports — platform-agnostic interfaces between the listener and its adapters."""

from groq_bridge.ports.inbound import IncomingMessage
from groq_bridge.ports.outbound import CompletionPort, NotificationPort

__all__ = [
    "IncomingMessage",
    "CompletionPort",
    "NotificationPort",
]

"""Groq Bridge — Discord commands answered by a Groq-hosted model."""

__version__ = "0.1.0"

from groq_bridge.config import AppConfig, ConfigError
from groq_bridge.domain.models import (
    Command,
    CommandRequest,
    CompletionErrorKind,
    CompletionResult,
)
from groq_bridge.domain.commands import parse_command
from groq_bridge.domain.listener import MessageListener
from groq_bridge.ports.inbound import IncomingMessage

__all__ = [
    "AppConfig",
    "ConfigError",
    "Command",
    "CommandRequest",
    "CompletionErrorKind",
    "CompletionResult",
    "parse_command",
    "MessageListener",
    "IncomingMessage",
]

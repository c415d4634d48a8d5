"""Domain layer — pure Python, no framework dependencies."""

from groq_bridge.domain.models import (
    Command,
    CommandRequest,
    CompletionErrorKind,
    CompletionResult,
)
from groq_bridge.domain.commands import parse_command

__all__ = [
    "Command",
    "CommandRequest",
    "CompletionErrorKind",
    "CompletionResult",
    "parse_command",
]

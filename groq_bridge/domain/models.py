"""Domain data models — pure Python dataclasses and enums."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Command(Enum):
    """Chat commands, in matching priority order.

    Each value is ``(prefix, directive)``; the directive is the first line
    of the prompt sent to the model.
    """

    SUMMARIZE = ("/summarize", "Summarize this:")
    EXPLAIN = ("/explain", "Explain this:")
    TRANSLATE = ("/translate", "Translate this to English:")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def directive(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class CommandRequest:
    """A recognized command and the text that followed its prefix."""

    command: Command
    argument: str

    @property
    def prompt(self) -> str:
        return f"{self.command.directive}\n{self.argument}"


class CompletionErrorKind(Enum):
    MISSING_API_KEY = "❌ GROQ_API_KEY is not set"
    ENCODE_FAILED = "❌ Failed to encode request"
    BUILD_FAILED = "❌ Failed to create Groq API request"
    TRANSPORT = "❌ Error contacting Groq API"
    READ_FAILED = "❌ Failed to read Groq response"
    PARSE_FAILED = "❌ Failed to parse Groq response"
    NO_CHOICES = "❌ No response from Groq model"
    MISSING_CONTENT = "❌ Groq response missing content"

    @property
    def message(self) -> str:
        return self.value


@dataclass
class CompletionResult:
    """Outcome of one completion call: generated text or an error kind."""

    success: bool
    text: Optional[str] = None
    error: Optional[CompletionErrorKind] = None
    detail: Optional[str] = None  # diagnostic only, never shown in chat

    @classmethod
    def ok(cls, text: str) -> "CompletionResult":
        return cls(success=True, text=text)

    @classmethod
    def fail(cls, error: CompletionErrorKind, detail: Optional[str] = None) -> "CompletionResult":
        return cls(success=False, error=error, detail=detail)

    def display_text(self) -> str:
        """Text to post back to the channel."""
        if self.success:
            return self.text or ""
        return self.error.message

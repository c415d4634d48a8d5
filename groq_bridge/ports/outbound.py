"""Outbound ports — interfaces for external system adapters."""

from typing import Protocol, runtime_checkable

from groq_bridge.domain.models import CompletionResult


@runtime_checkable
class CompletionPort(Protocol):
    """Interface for completion backends. Implementations never raise."""

    async def get_completion(self, prompt: str) -> CompletionResult: ...


@runtime_checkable
class NotificationPort(Protocol):
    """Interface for sending messages to channels."""

    async def send(self, channel_id: int, text: str) -> None: ...

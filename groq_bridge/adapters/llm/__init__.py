"""LLM adapters — Groq chat-completion client."""

from groq_bridge.adapters.llm.groq_client import GroqClient
from groq_bridge.adapters.llm.schemas import ChatChoice, ChatCompletionResponse, ChatMessage

__all__ = [
    "GroqClient",
    "ChatChoice",
    "ChatCompletionResponse",
    "ChatMessage",
]

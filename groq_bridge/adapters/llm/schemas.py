"""Response schema for OpenAI-compatible chat completions."""

from typing import Any, List

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    content: str


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    """Top-level response body. Only ``choices`` is read; other fields are ignored.

    Choices stay untyped here so that an empty or malformed list can be told
    apart from a first choice that lacks its content.
    """

    choices: List[Any] = Field(default_factory=list)

    def first_choice(self) -> ChatChoice:
        return ChatChoice.model_validate(self.choices[0])

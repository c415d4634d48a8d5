"""Groq chat-completion client using aiohttp. Implements CompletionPort."""

import asyncio
import json
import sys
from typing import Optional

import aiohttp
from pydantic import ValidationError

from groq_bridge.adapters.llm.schemas import ChatCompletionResponse
from groq_bridge.config import AppConfig
from groq_bridge.domain.models import CompletionErrorKind, CompletionResult


def _log(msg: str):
    print(msg, file=sys.stderr)


class _ReadFailed(Exception):
    """Response started but the body could not be read"""


class GroqClient:
    """Sends one prompt per call to the Groq completion endpoint.

    ``get_completion`` never raises for network or response problems; every
    failure comes back as a CompletionResult with an error kind. There is no
    retry, and each call opens its own session.
    """

    def __init__(self, config: AppConfig):
        self._config = config

    @property
    def is_configured(self) -> bool:
        return bool(self._config.groq_api_key)

    def build_payload(self, prompt: str) -> dict:
        return {
            "model": self._config.groq_model,
            "messages": [
                {"role": "user", "content": prompt},
            ],
        }

    async def get_completion(self, prompt: str) -> CompletionResult:
        if not self.is_configured:
            return CompletionResult.fail(CompletionErrorKind.MISSING_API_KEY)

        try:
            data = json.dumps(self.build_payload(prompt))
        except (TypeError, ValueError) as e:
            return CompletionResult.fail(CompletionErrorKind.ENCODE_FAILED, str(e))

        timeout = self._config.request_timeout
        try:
            body = await asyncio.wait_for(self._post(data), timeout=timeout)
        except _ReadFailed as e:
            return CompletionResult.fail(CompletionErrorKind.READ_FAILED, str(e))
        except aiohttp.InvalidURL as e:
            return CompletionResult.fail(CompletionErrorKind.BUILD_FAILED, str(e))
        except asyncio.TimeoutError:
            return CompletionResult.fail(CompletionErrorKind.TRANSPORT, f"Timeout ({timeout}s)")
        except aiohttp.ClientError as e:
            return CompletionResult.fail(CompletionErrorKind.TRANSPORT, str(e))

        return self.parse_response(body)

    async def _post(self, data: str) -> bytes:
        headers = {
            "Authorization": f"Bearer {self._config.groq_api_key}",
            "Content-Type": "application/json",
        }
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(self._config.groq_endpoint, data=data, headers=headers) as resp:
                if resp.status >= 400:
                    _log(f"[groq] HTTP {resp.status} from completion endpoint")
                try:
                    return await resp.read()
                except aiohttp.ClientError as e:
                    raise _ReadFailed(str(e)) from e

    @staticmethod
    def parse_response(body: bytes) -> CompletionResult:
        """Extract ``choices[0].message.content`` from a response body."""
        try:
            raw = json.loads(body)
        except ValueError as e:
            return CompletionResult.fail(CompletionErrorKind.PARSE_FAILED, str(e))
        if not isinstance(raw, dict):
            return CompletionResult.fail(
                CompletionErrorKind.PARSE_FAILED, f"expected object, got {type(raw).__name__}"
            )

        try:
            parsed = ChatCompletionResponse.model_validate(raw)
        except ValidationError as e:
            return CompletionResult.fail(CompletionErrorKind.NO_CHOICES, _first_error(e))
        if not parsed.choices:
            return CompletionResult.fail(CompletionErrorKind.NO_CHOICES, _error_detail(raw))

        try:
            choice = parsed.first_choice()
        except ValidationError as e:
            return CompletionResult.fail(CompletionErrorKind.MISSING_CONTENT, _first_error(e))
        return CompletionResult.ok(choice.message.content)


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err["loc"])
    return f"{loc}: {err['msg']}"


def _error_detail(raw: dict) -> Optional[str]:
    """Pull the provider's error message out of an error body, if there is one."""
    error = raw.get("error")
    if isinstance(error, dict):
        return error.get("message")
    if error is not None:
        return str(error)
    return None

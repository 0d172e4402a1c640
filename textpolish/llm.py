"""Chat completion client used to improve text."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from .errors import APIError

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = "Improve this text in {language} and only return the improved text: {text}"


@dataclass
class ChatMessage:
    role: str
    content: str


@dataclass
class ChatRequest:
    model: str
    messages: List[ChatMessage] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
        }


@dataclass
class ChatResponse:
    choices: List[str] = field(default_factory=list)
    error_message: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChatResponse":
        """Parse a chat completion body, keeping only the message contents."""
        choices = []
        for choice in data.get("choices") or []:
            message = (choice or {}).get("message") or {}
            choices.append(message.get("content") or "")

        error = data.get("error")
        if isinstance(error, dict):
            error_message = error.get("message") or ""
        else:
            error_message = error or ""
        return cls(choices=choices, error_message=str(error_message))


def build_prompt(text: str, language: str) -> str:
    return PROMPT_TEMPLATE.format(language=language, text=text)


def build_request(model: str, text: str, language: str) -> ChatRequest:
    """Build a single-message request asking the model to improve text."""
    return ChatRequest(
        model=model,
        messages=[ChatMessage(role="user", content=build_prompt(text, language))],
    )


class OpenAIClient:
    """Sends chat completion requests to an OpenAI-compatible endpoint."""

    def __init__(self, api_key: str, endpoint: str, timeout: float,
                 session: Optional[requests.Session] = None):
        self.endpoint = endpoint
        self.timeout = timeout
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        self.session = session or requests.Session()

    def complete(self, request: ChatRequest) -> ChatResponse:
        """POST a chat request and return the parsed response.

        Raises APIError for transport failures, non-2xx statuses, bodies that
        are not JSON objects and error messages embedded in a 2xx response.
        """
        logger.debug(f"POST {self.endpoint} (model={request.model})")
        start_time = time.time()
        try:
            response = self.session.post(
                self.endpoint,
                headers=self.headers,
                json=request.to_dict(),
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise APIError(f"request timed out after {self.timeout:g} seconds: {e}") from e
        except requests.RequestException as e:
            raise APIError(f"error making request: {e}") from e
        logger.debug(f"LLM call took {time.time() - start_time:.2f} seconds")

        if not 200 <= response.status_code < 300:
            raise APIError(
                f"HTTP status not OK ({response.status_code} {response.reason}): {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise APIError(f"error deserializing response: {e}") from e
        if not isinstance(data, dict):
            raise APIError("error deserializing response: expected a JSON object")

        try:
            parsed = ChatResponse.from_dict(data)
        except (AttributeError, TypeError) as e:
            raise APIError(f"error deserializing response: unexpected shape ({e})") from e
        if parsed.error_message:
            raise APIError(f"OpenAI API error: {parsed.error_message}")
        return parsed

    def improve(self, model: str, text: str, language: str) -> str:
        """Return the model's improved version of text."""
        response = self.complete(build_request(model, text, language))
        if not response.choices:
            raise APIError("no choices returned")
        return response.choices[0]

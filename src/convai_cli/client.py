"""HTTP client for the ElevenLabs Conversational AI API."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from .config import Config
from .exceptions import api_error_for
from .models import Conversation, ConversationListItem, ConversationListResponse

logger = logging.getLogger(__name__)

CONVERSATIONS_PATH = "/v1/convai/conversations"


class ConvAIClient:
    """Thin wrapper around the three conversation endpoints."""

    def __init__(self, config: Config, transport: httpx.BaseTransport | None = None):
        self.http = httpx.Client(
            base_url=config.base_url,
            headers={"xi-api-key": config.api_key},
            timeout=config.timeout,
            transport=transport,
        )

    def __enter__(self) -> ConvAIClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self):
        self.http.close()

    def _get(self, path: str, **kwargs) -> httpx.Response:
        """GET ``path``, turning error statuses into APIError.

        Transport failures (DNS, refused connection, timeout) propagate as
        the original httpx exception.
        """
        logger.debug("GET %s %s", path, kwargs.get("params") or "")
        response = self.http.get(path, **kwargs)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise api_error_for(e.response.status_code, e.response.reason_phrase) from None
        return response

    def get_conversation(self, conversation_id: str) -> Conversation:
        response = self._get(f"{CONVERSATIONS_PATH}/{quote(conversation_id, safe='')}")
        return Conversation.model_validate(response.json())

    def list_conversations(self, limit: int = 10, offset: int = 0) -> list[ConversationListItem]:
        """List conversations in the order the service returns them.

        Only one page is requested, sized to cover ``offset + limit`` items.
        """
        response = self._get(CONVERSATIONS_PATH, params={"page_size": offset + limit})
        page = ConversationListResponse.model_validate(response.json())
        return page.conversations[offset : offset + limit]

    def get_audio(self, conversation_id: str) -> bytes:
        response = self._get(f"{CONVERSATIONS_PATH}/{quote(conversation_id, safe='')}/audio")
        logger.debug("Received %d bytes of audio", len(response.content))
        return response.content

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Dict

import httpx
from fastapi import Depends

from itinerary_api.core.config import Settings, get_request_settings

logger = logging.getLogger(__name__)


async def get_http_client(
    settings: Settings = Depends(get_request_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """Yields a per-request client; the timeout is disabled unless configured."""
    async with httpx.AsyncClient(timeout=settings.openai_timeout_seconds) as client:
        yield client


class CompletionClient:
    """Thin adapter over the OpenAI chat completions endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, url: str):
        self.http_client = http_client
        self.url = url

    async def create_chat_completion(self, payload: Dict[str, Any], api_key: str) -> httpx.Response:
        """
        Issues exactly one POST and returns the raw response, whatever its status.
        Transport errors (DNS, connection, timeout) propagate as httpx exceptions.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        logger.info("Making request to OpenAI API...")
        resp = await self.http_client.post(self.url, headers=headers, json=payload)
        logger.info("OpenAI API response status: %s %s", resp.status_code, resp.reason_phrase)
        return resp

from __future__ import annotations

import json
import logging
from typing import Any

from itinerary_api.ai.openai_client import CompletionClient
from itinerary_api.ai.prompts import build_itinerary_payload
from itinerary_api.core.config import Settings
from itinerary_api.core.logging import redact_secret
from itinerary_api.domain.models import (
    CompletionSucceeded,
    CredentialMissing,
    GenerationOutcome,
    UnclassifiedFault,
    UnexpectedResponseShape,
    UnparseableResponse,
    UpstreamRejected,
)

logger = logging.getLogger(__name__)

MISSING_KEY_HINT = "Please add OPENAI_API_KEY to your .env.local file"
DETAILS_PREVIEW_CHARS = 200
LOG_PREVIEW_CHARS = 500


def reject_json_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json(text: str) -> Any:
    """Strict JSON parse; NaN and Infinity are rejected as they are not JSON."""
    return json.loads(text, parse_constant=reject_json_constant)


def describe_fault(exc: BaseException) -> str:
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


def unclassified_fault(exc: BaseException) -> UnclassifiedFault:
    return UnclassifiedFault(message=str(exc) or "Internal server error", details=describe_fault(exc))


def extract_error_message(raw_text: str, status_code: int) -> str:
    """
    Best-effort message for a rejected upstream call: the provider's
    ``error.message`` when the body is JSON carrying one, else the raw body,
    else a generic status line.
    """
    try:
        data = parse_json(raw_text)
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message
    return raw_text or f"OpenAI API error: {status_code}"


def has_first_choice_message(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return False
    first = choices[0]
    if not isinstance(first, dict):
        return False
    # Empty objects and lists count as present; only null, false, 0 and "" do not.
    message = first.get("message")
    return not (message is None or message is False or message == 0 or message == "")


class ItineraryGenerationService:
    def __init__(self, settings: Settings, client: CompletionClient):
        self.settings = settings
        self.client = client

    async def generate(self, prompt: str) -> GenerationOutcome:
        """Runs one completion call for ``prompt``; never raises."""
        try:
            return await self._generate(prompt)
        except Exception as exc:
            logger.exception("Unhandled error while generating itinerary: %s", exc)
            return unclassified_fault(exc)

    async def _generate(self, prompt: str) -> GenerationOutcome:
        api_key = self.settings.openai_api_key
        if not api_key:
            logger.error("OPENAI_API_KEY not found in configuration")
            return CredentialMissing(hint=MISSING_KEY_HINT)
        logger.info("API key found, starting with: %s", redact_secret(api_key))

        resp = await self.client.create_chat_completion(build_itinerary_payload(prompt), api_key)

        if not resp.is_success:
            error_text = resp.text
            logger.error("OpenAI API error: %s", error_text)
            return UpstreamRejected(
                status=resp.status_code,
                message=extract_error_message(error_text, resp.status_code),
            )

        response_text = resp.text
        logger.info("Response received, length: %s", len(response_text))
        try:
            data = parse_json(response_text)
        except ValueError as exc:
            logger.error("Failed to parse JSON: %s", exc)
            logger.error("Response text: %s", response_text[:LOG_PREVIEW_CHARS])
            return UnparseableResponse(details=response_text[:DETAILS_PREVIEW_CHARS])
        logger.info("Successfully parsed JSON response")

        if not has_first_choice_message(data):
            logger.error("Unexpected response structure: %s", data)
            return UnexpectedResponseShape(data=data)

        return CompletionSucceeded(payload=data)

import httpx
from fastapi import Depends

from itinerary_api.ai.openai_client import CompletionClient, get_http_client
from itinerary_api.core.config import Settings, get_request_settings
from itinerary_api.domain.services.itinerary_service import ItineraryGenerationService


def get_itinerary_service(
    settings: Settings = Depends(get_request_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> ItineraryGenerationService:
    client = CompletionClient(http_client, settings.openai_chat_completions_url)
    return ItineraryGenerationService(settings=settings, client=client)


__all__ = [
    "get_itinerary_service",
    "get_request_settings",
    "get_http_client",
]

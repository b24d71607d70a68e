"""Prompt and request constants for itinerary generation."""

from typing import Any, Dict

ITINERARY_MODEL = "gpt-4o"
ITINERARY_MAX_TOKENS = 4000
ITINERARY_TEMPERATURE = 0.7

ITINERARY_SYSTEM_PROMPT = (
    "You are a professional travel planner who creates detailed, personalized travel itineraries."
)


def build_itinerary_payload(prompt: str) -> Dict[str, Any]:
    return {
        "model": ITINERARY_MODEL,
        "messages": [
            {"role": "system", "content": ITINERARY_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "max_tokens": ITINERARY_MAX_TOKENS,
        "temperature": ITINERARY_TEMPERATURE,
    }

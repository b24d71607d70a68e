import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from itinerary_api.api.models.schemas import GenerateItineraryRequest
from itinerary_api.core.errors import MethodNotAllowedError, ValidationError, error_content
from itinerary_api.dependencies import get_itinerary_service
from itinerary_api.domain.models import (
    CompletionSucceeded,
    CredentialMissing,
    GenerationOutcome,
    UnclassifiedFault,
    UnexpectedResponseShape,
    UnparseableResponse,
    UpstreamRejected,
)
from itinerary_api.domain.services.itinerary_service import ItineraryGenerationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["itinerary"])

NON_POST_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def read_prompt(request: Request) -> str:
    raw = await request.body()
    payload: Any = json.loads(raw) if raw.strip() else {}
    if not isinstance(payload, dict):
        payload = {}
    try:
        body = GenerateItineraryRequest.model_validate(payload)
    except PydanticValidationError:
        body = GenerateItineraryRequest()
    if not body.prompt:
        logger.info("No prompt provided")
        raise ValidationError("Prompt is required")
    return body.prompt


def outcome_response(outcome: GenerationOutcome) -> JSONResponse:
    content: Dict[str, Any]
    if isinstance(outcome, CompletionSucceeded):
        logger.info("Returning successful response")
        return JSONResponse(status_code=status.HTTP_200_OK, content=outcome.payload)
    if isinstance(outcome, CredentialMissing):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        content = error_content("API key not configured", hint=outcome.hint)
    elif isinstance(outcome, UpstreamRejected):
        status_code = outcome.status
        content = error_content(outcome.message, status=outcome.status)
    elif isinstance(outcome, UnparseableResponse):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        content = error_content("Failed to parse API response", details=outcome.details)
    elif isinstance(outcome, UnexpectedResponseShape):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        content = error_content("Unexpected response format from OpenAI", data=outcome.data)
    elif isinstance(outcome, UnclassifiedFault):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        content = error_content(outcome.message, details=outcome.details)
    else:
        raise TypeError(f"Unknown generation outcome: {outcome!r}")
    return JSONResponse(status_code=status_code, content=content)


@router.post("/generate-itinerary")
async def generate_itinerary(
    request: Request,
    svc: ItineraryGenerationService = Depends(get_itinerary_service),
):
    logger.info("Generate itinerary called, method: %s", request.method)

    prompt = await read_prompt(request)
    logger.info("Prompt received, length: %s", len(prompt))

    outcome = await svc.generate(prompt)
    return outcome_response(outcome)


# Registered after the POST route and without the service dependency, so
# preflight and rejected methods never touch settings or open an HTTP client.
@router.api_route("/generate-itinerary", methods=NON_POST_METHODS, include_in_schema=False)
async def generate_itinerary_other_methods(request: Request):
    logger.info("Generate itinerary called, method: %s", request.method)

    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK)
    logger.info("Method not allowed: %s", request.method)
    raise MethodNotAllowedError()

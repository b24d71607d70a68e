from typing import Awaitable, Callable, Dict

from fastapi import Request, Response

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


async def add_cors_headers(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """
    Stamps the fixed CORS headers on every response, whatever the outcome.
    Starlette's CORSMiddleware only answers requests carrying an Origin header
    and echoes its own allow lists, so the headers are set directly instead.
    """
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response

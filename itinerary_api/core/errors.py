from typing import Any, Dict

from fastapi import HTTPException, status


class APIError(HTTPException):
    def __init__(self, status_code: int, message: str, **extra: Any):
        super().__init__(status_code=status_code, detail=message)
        self.extra = extra


class ValidationError(APIError):
    def __init__(self, message: str, **extra: Any):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, **extra)


class MethodNotAllowedError(APIError):
    def __init__(self, message: str = "Method not allowed"):
        super().__init__(status.HTTP_405_METHOD_NOT_ALLOWED, message)


def error_content(message: str, **extra: Any) -> Dict[str, Any]:
    return {"error": message, **extra}

"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from abonnement.domain.exceptions import AbonnementException, ValidationError
from abonnement.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NO_UPDATES": status.HTTP_400_BAD_REQUEST,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STORAGE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def abonnement_exception_handler(
    request: Request, exc: AbonnementException
) -> JSONResponse:
    """
    Handle Abonnement domain exceptions.

    Converts domain exceptions to appropriate HTTP responses. Storage
    failures expose only the failed operation, never backend detail.
    """
    status_code = STATUS_CODE_MAP.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    content = {
        "error": exc.code,
        "message": exc.message,
    }
    if isinstance(exc, ValidationError):
        content["field"] = exc.field

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")

    return JSONResponse(status_code=status_code, content=content)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies and query parameters.

    Reports the first offending field with the same body shape as
    domain validation errors.
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part not in ("body",)]
    field = location[-1] if location else "body"
    reason = first.get("msg", "invalid request")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "VALIDATION_ERROR",
            "message": f"Validation failed for {field}: {reason}",
            "field": field,
        },
    )

"""Error types and the translation of rejected requests into responses.

Only two rejection shapes ever reach a client:
- CORS violation -> 403 with a description of the forbidden condition
- everything else -> 404 "Route not found"

Both are plain text. There are no structured error bodies.
"""

from fastapi.responses import PlainTextResponse

ROUTE_NOT_FOUND = "Route not found"


class StartupDataError(RuntimeError):
    """The packaged question data is missing or does not match the schema."""


class InvalidQuestionId(ValueError):
    """A question identifier was built from an empty string."""


class CorsForbidden(Exception):
    """A request violated the configured cross-origin policy."""

    ORIGIN_NOT_ALLOWED = "origin not allowed"
    METHOD_NOT_ALLOWED = "requested method not allowed"
    HEADER_NOT_ALLOWED = "header not allowed"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"CORS request forbidden: {self.reason}"


def rejection_response(exc: Exception) -> PlainTextResponse:
    """Render a rejected request as an HTTP response.

    Args:
        exc: The rejection cause.

    Returns:
        403 for CORS violations, 404 "Route not found" for anything else.
    """
    if isinstance(exc, CorsForbidden):
        return PlainTextResponse(str(exc), status_code=403)
    return PlainTextResponse(ROUTE_NOT_FOUND, status_code=404)

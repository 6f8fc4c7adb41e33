"""Cross-origin policy and the middleware enforcing it.

Requests carrying an Origin header are checked before routing:
- origin must be allowed
- preflight (OPTIONS) must name an allowed Access-Control-Request-Method
- every name in Access-Control-Request-Headers must be allowed

Violations are answered with 403 and never reach a route. Allowed requests
are handed to Starlette's CORSMiddleware, which answers preflights and adds
the Access-Control-* response headers.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

from questions_api.errors import CorsForbidden, rejection_response
from questions_api.settings import Settings

logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class CorsPolicy:
    """Allowed origins, methods and request headers."""

    allow_origins: tuple[str, ...] = ("*",)
    allow_methods: tuple[str, ...] = ("PUT", "DELETE", "GET", "POST")
    allow_headers: tuple[str, ...] = ("content-type",)

    @classmethod
    def from_settings(cls, settings: Settings) -> CorsPolicy:
        return cls(
            allow_origins=tuple(settings.cors_allow_origins),
            allow_methods=tuple(m.upper() for m in settings.cors_allow_methods),
            allow_headers=tuple(h.lower() for h in settings.cors_allow_headers),
        )

    @property
    def allow_any_origin(self) -> bool:
        return "*" in self.allow_origins

    def is_origin_allowed(self, origin: str) -> bool:
        return self.allow_any_origin or origin in self.allow_origins

    def is_method_allowed(self, method: str) -> bool:
        return method.strip() in self.allow_methods

    def is_header_allowed(self, header: str) -> bool:
        return header.strip().lower() in self.allow_headers

    def check(self, method: str, headers: Headers) -> None:
        """Validate a request against the policy.

        Requests without an Origin header are not CORS requests and pass.

        Raises:
            CorsForbidden: The request violates the policy.
        """
        origin = headers.get("origin")
        if origin is None:
            return
        if not self.is_origin_allowed(origin):
            raise CorsForbidden(CorsForbidden.ORIGIN_NOT_ALLOWED)
        if method != "OPTIONS":
            return

        requested_method = headers.get("access-control-request-method")
        if requested_method is None or not self.is_method_allowed(requested_method):
            raise CorsForbidden(CorsForbidden.METHOD_NOT_ALLOWED)

        requested_headers = headers.get("access-control-request-headers")
        if requested_headers is not None:
            for header in requested_headers.split(","):
                if not self.is_header_allowed(header):
                    raise CorsForbidden(CorsForbidden.HEADER_NOT_ALLOWED)


class CorsPolicyMiddleware(CORSMiddleware):
    """CORSMiddleware that rejects policy violations with 403."""

    def __init__(self, app: ASGIApp, policy: CorsPolicy) -> None:
        super().__init__(
            app,
            allow_origins=list(policy.allow_origins),
            allow_methods=list(policy.allow_methods),
            allow_headers=list(policy.allow_headers),
        )
        self.policy = policy

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            try:
                self.policy.check(scope["method"], Headers(scope=scope))
            except CorsForbidden as e:
                logger.info(f"Rejected {scope['method']} {scope['path']}: {e}")
                await rejection_response(e)(scope, receive, send)
                return
        await super().__call__(scope, receive, send)

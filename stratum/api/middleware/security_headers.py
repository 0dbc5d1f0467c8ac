"""Security headers added to every response."""

from collections.abc import Awaitable, Callable, Mapping

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from stratum.core.constants import DEFAULT_HSTS_MAX_AGE

DEFAULT_SECURITY_HEADERS: Mapping[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


def build_hsts_header(
    max_age: int = DEFAULT_HSTS_MAX_AGE,
    *,
    include_subdomains: bool = True,
    preload: bool = False,
) -> str:
    """Build a Strict-Transport-Security header value.

    Args:
        max_age: Max age in seconds.
        include_subdomains: Whether to add ``includeSubDomains``.
        preload: Whether to add ``preload``.

    Returns:
        str: The header value.
    """
    parts = [f"max-age={max_age}"]
    if include_subdomains:
        parts.append("includeSubDomains")
    if preload:
        parts.append("preload")
    return "; ".join(parts)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add a fixed set of security headers to all responses.

    Headers already set by the route are left alone, so an endpoint can
    opt into caching by setting its own ``Cache-Control``.

    Args:
        app: The ASGI application to wrap.
        hsts_enabled: Whether to include the HSTS header.
        hsts_max_age: Max age for HSTS in seconds.
        extra_headers: Additional headers to set on every response.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        hsts_enabled: bool = True,
        hsts_max_age: int = DEFAULT_HSTS_MAX_AGE,
        extra_headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(app)
        headers = dict(DEFAULT_SECURITY_HEADERS)
        if hsts_enabled:
            headers["Strict-Transport-Security"] = build_hsts_header(hsts_max_age)
        headers.update(extra_headers or {})
        self.headers = headers

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Add security headers to the response.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or route handler.

        Returns:
            Response: The HTTP response with security headers added.
        """
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response

"""
HTTP Middleware

Security headers, CORS, gzip compression and the internal-error fallback,
installed in a fixed order around the route table.
"""

import logging
from typing import Callable, Dict, Mapping, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .handlers.system import utc_timestamp
from .models import InternalServerError

logger = logging.getLogger(__name__)

DEFAULT_SECURITY_HEADERS: Dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}

# Headers that only fingerprint the server stack
STRIPPED_HEADERS = ("X-Powered-By",)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add common security headers to every response.

    Headers already set by a handler are left untouched. Pass ``overrides`` to
    change a value; an override of ``None`` drops that header.
    """

    def __init__(self, app, overrides: Optional[Mapping[str, Optional[str]]] = None):
        super().__init__(app)
        headers = dict(DEFAULT_SECURITY_HEADERS)
        for name, value in (overrides or {}).items():
            if value is None:
                headers.pop(name, None)
            else:
                headers[name] = value
        self.headers = headers

    async def dispatch(self, request: Request, call_next: Callable):
        response = await call_next(request)
        for name, value in self.headers.items():
            if name not in response.headers:
                response.headers[name] = value
        for name in STRIPPED_HEADERS:
            if name in response.headers:
                del response.headers[name]
        return response


class InternalErrorMiddleware(BaseHTTPMiddleware):
    """Turn any exception raised while building a response into a 500 body.

    Installed innermost so the error response still passes through the
    security header, CORS and compression layers.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"Error: {exc}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content=InternalServerError(
                    message=str(exc),
                    timestamp=utc_timestamp()
                ).model_dump()
            )


def install_middleware(
    app: FastAPI,
    compression_min_size: int = 1000,
    security_overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> None:
    """
    Install the middleware chain on an app.

    Starlette wraps the app with each added middleware, so they are added
    innermost first. Request order is: security headers, CORS, compression,
    internal-error fallback.
    """
    app.add_middleware(InternalErrorMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=compression_min_size)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, overrides=security_overrides)
    logger.debug(f"Middleware installed (gzip minimum_size={compression_min_size})")

"""
CORS middleware for the homepage API.

Every response gets the same permissive CORS headers, and any OPTIONS
request is answered directly as a preflight, whether or not the path exists.
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


def cors_headers(allow_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, allow_origin: str = "*"):
        super().__init__(app)
        self.headers = cors_headers(allow_origin)

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return Response(
                status_code=200,
                headers={**self.headers, "Content-Type": "application/json"},
            )

        response = await call_next(request)
        response.headers.update(self.headers)
        return response

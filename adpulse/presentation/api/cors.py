"""
AdPulse – CORS Middleware
==========================
Agrega los headers CORS a cada respuesta y contesta cualquier
OPTIONS con 204 sin llegar al router.
"""

from __future__ import annotations

from typing import Dict, Sequence

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class CorsMiddleware(BaseHTTPMiddleware):
    """Preflight 204 + Access-Control-* en todas las respuestas."""

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str = "*",
        allow_methods: Sequence[str] = ("GET", "POST", "OPTIONS"),
        allow_headers: Sequence[str] = ("Content-Type",),
    ):
        super().__init__(app)
        self._headers: Dict[str, str] = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self._headers)

        response = await call_next(request)
        response.headers.update(self._headers)
        return response

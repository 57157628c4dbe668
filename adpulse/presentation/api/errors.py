"""
AdPulse – API Error Handlers
==============================
Traduce los errores que FastAPI detecta antes de llegar al handler
(JSON mal formado, body que no es un objeto) al mismo formato
{"error": ...} con status 400.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from adpulse.shared.logging.logger import get_logger

logger = get_logger("api.errors")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Request inválido %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)

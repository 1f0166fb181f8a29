# api/errors.py
"""
Single error boundary: every failure leaves the API as
{success: false, statusCode, message, error, path, method, timestamp}.
"""

import logging
from datetime import datetime, UTC
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from core.errors import CatalogError, classify

logger = logging.getLogger(__name__)


def error_body(error: CatalogError, request: Request) -> Dict[str, Any]:
    return {
        "success": False,
        "statusCode": error.status_code,
        "message": error.message,
        "error": error.error,
        "path": request.url.path,
        "method": request.method,
        "timestamp": datetime.now(UTC).isoformat(),
    }


async def catalog_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any exception through the error taxonomy"""
    error = classify(exc)

    if error.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {error.message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} -> {error.status_code} {error.kind.value}: {error.message}")

    return JSONResponse(status_code=error.status_code, content=error_body(error, request))


def setup_error_handling(app: FastAPI) -> None:
    """Route every failure kind through catalog_exception_handler"""
    app.add_exception_handler(CatalogError, catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, catalog_exception_handler)
    app.add_exception_handler(HTTPException, catalog_exception_handler)
    app.add_exception_handler(SQLAlchemyError, catalog_exception_handler)
    # Catch-all; Starlette still re-raises these after responding so servers log them
    app.add_exception_handler(Exception, catalog_exception_handler)

"""
Miller Notation API Server
==========================

Endpoints:
- POST /api/parse  -> Parse plane "(hkl)" or direction "[uvw]" notation
- GET  /health     -> Liveness

Usage:
    uvicorn miller_notation.api:app --port 8081
"""
import logging
from typing import Literal, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictStr

from .config import Settings, get_settings
from .models import DirectionNotation, ParseFailure, ParseResult, PlaneNotation
from .parser import parse_notation

logger = logging.getLogger(__name__)

JSON_ERROR_MESSAGE = "Error parsing JSON"


# =============================================================================
# SCHEMAS
# =============================================================================

class ParseRequest(BaseModel):
    input: StrictStr = ""


class ParseResponse(BaseModel):
    type: Literal["plane", "direction"]
    indices: list[float]
    intercept: Optional[list[float]] = None


def result_to_response(result: ParseResult) -> ParseResponse:
    """Map a parse result onto the wire schema.

    Raises:
        HTTPException: 400 for any ParseFailure
    """
    if isinstance(result, ParseFailure):
        raise HTTPException(status_code=400, detail=result.message)
    if isinstance(result, (PlaneNotation, DirectionNotation)):
        return ParseResponse(**result.to_dict())
    raise TypeError(f"Unhandled parse result: {result!r}")


# =============================================================================
# APPLICATION
# =============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Service settings, defaults to get_settings()
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Miller Notation API",
        version="1.0.0",
        description="Parses Miller index notation for lattice planes and directions",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"detail": JSON_ERROR_MESSAGE})

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    @app.post("/api/parse", response_model=ParseResponse)
    def parse(request: ParseRequest) -> ParseResponse:
        """Parse a notation string into indices and, for planes, intercepts."""
        result = parse_notation(request.input)
        if isinstance(result, ParseFailure):
            logger.info("Rejected %r: %s", request.input, result.reason.value)
        else:
            logger.debug("Parsed %r as %s %s", request.input, result.kind.value, result.notation)
        return result_to_response(result)

    @app.options("/api/parse")
    def parse_preflight() -> Response:
        return Response(status_code=200)

    return app


app = create_app()

"""
Busbar Calculator HTTP API
==========================

FastAPI application exposing the sizing core. Core errors are mapped to
4xx responses whose body lists every problem found in the request.

Usage:
    busbar-sizing-api                      # host/port from settings
    BUSBAR_API_PORT=9000 busbar-sizing-api
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import AppSettings, load_settings
from ..errors import (
    BusbarCalculationError,
    BusbarValidationError,
    InvalidSimulationParametersError,
    MissingPrerequisiteDataError,
    UnknownMaterialError,
)
from ..logging_config import setup_logging
from .routes import router

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    BusbarValidationError: 422,
    UnknownMaterialError: status.HTTP_400_BAD_REQUEST,
    InvalidSimulationParametersError: status.HTTP_400_BAD_REQUEST,
    MissingPrerequisiteDataError: status.HTTP_400_BAD_REQUEST,
}


async def _calculation_error_handler(request: Request, exc: BusbarCalculationError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="Busbar Calculator API",
        version=__version__,
        description="Busbar thermal/mechanical sizing and short-circuit simulation.",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(BusbarCalculationError, _calculation_error_handler)
    app.include_router(router)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_dir)
    logger.info("Starting Busbar Calculator API on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()

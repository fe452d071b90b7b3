"""
FastAPI main application for the rebalancing backtester.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from rebalancer import __version__
from rebalancer.config.settings import get_settings
from rebalancer.core.exceptions.backtest import (
    BacktestException,
    CalculationError,
    DataError,
    InvalidRangeError,
    ValidationError,
)
from rebalancer.core.logging_setup import configure_logging

from .routers import backtest, data
from .schemas.api_models import ErrorResponse

ERROR_STATUS_CODES: dict[type[BacktestException], int] = {
    ValidationError: 422,
    InvalidRangeError: 422,
    CalculationError: 422,
    DataError: 503,
}


def create_app() -> FastAPI:
    """Build the API application."""
    settings = get_settings()
    configure_logging(settings.log_level, serialize=settings.log_json)

    app = FastAPI(
        title="Bitcoin Rebalancing Backtest API",
        version=__version__,
        description="API for backtesting threshold rebalancing between Bitcoin and cash",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Development frontend
            "http://localhost:8080",  # Alternative development port
        ],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    app.include_router(backtest.router, prefix="/api/backtest", tags=["backtest"])
    app.include_router(data.router, prefix="/api/data", tags=["data"])
    app.add_exception_handler(BacktestException, backtest_exception_handler)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {
            "message": "Bitcoin Rebalancing Backtest API",
            "version": __version__,
            "status": "running",
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


async def backtest_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate domain exceptions into error responses."""
    status_code = next(
        (code for exc_type, code in ERROR_STATUS_CODES.items() if isinstance(exc, exc_type)),
        500,
    )
    logger.warning(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=type(exc).__name__, message=str(exc)).model_dump(
            exclude_none=True
        ),
    )


app = create_app()

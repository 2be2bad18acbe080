"""FastAPI application - minimal setup with dependency injection."""
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from stock_api.api.dependencies import init_services
from stock_api.api.routes import stocks
from stock_api.config import app_config
from stock_api.domain.errors import StockApiError
from stock_api.infrastructure.eastmoney_client import EastmoneyQuoteClient
from stock_api.repository.sqlite_client import SQLiteConnection

logging.basicConfig(
    level=app_config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting application...")

    # Initialize database connection (creates schema if absent)
    connection = SQLiteConnection()
    connection.connect()

    # Shared outbound HTTP client
    quote_client = EastmoneyQuoteClient()
    await quote_client.connect()

    # Initialize services with DI
    init_services(connection, quote_client)

    logger.info("Application started")
    yield

    # Shutdown
    logger.info("Shutting down...")
    await quote_client.close()
    connection.disconnect()
    logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title="Stock API",
    description="A-share current price lookup with local price log",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(stocks.router)


@app.get("/favicon.ico", include_in_schema=False)
async def favicon() -> FileResponse:
    """Serve the configured icon file."""
    if not os.path.isfile(app_config.FAVICON_PATH):
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(app_config.FAVICON_PATH)


@app.exception_handler(StockApiError)
async def stock_api_error_handler(request: Request, exc: StockApiError):
    """Render domain errors as {"error": message}."""
    logger.warning(
        f"{type(exc).__name__} on {request.url.path}: {exc.message} ({exc.http_status})"
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all - never leaks internal details."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=StockApiError().to_response(),
    )


def run() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(app, host=app_config.HOST, port=app_config.PORT)


if __name__ == "__main__":
    run()

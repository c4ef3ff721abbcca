"""
Recipe Finder Backend - FastAPI Server

Serves the search session behind the recipe search page: result cards,
category shortcuts, random suggestions and the details view.
"""

import argparse
import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.config import FinderConfig
from ..core.debounce import SearchInputController
from ..core.mealdb import MealDBClient
from ..core.scheduling import AsyncioScheduler
from ..core.selection import SelectionStore
from ..core.session import SearchSession
from .routes import details, search

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def create_app(
    config: FinderConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
    store: SelectionStore | None = None,
) -> FastAPI:
    """Build the API app; the session is created when the app starts."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        finder_config = config or FinderConfig.from_env()
        client = MealDBClient.from_config(finder_config, client=http_client)
        session = SearchSession(
            client,
            store=store or SelectionStore(),
            config=finder_config,
        )
        session.load_local()
        app.state.session = session
        app.state.search_input = SearchInputController(session, AsyncioScheduler())
        yield
        app.state.search_input.cancel_pending()
        await client.aclose()

    app = FastAPI(
        title="Recipe Finder Backend",
        description="Recipe search over TheMealDB merged with a bundled local dataset",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(search.router, prefix="/api", tags=["search"])
    app.include_router(details.router, prefix="/api", tags=["details"])

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors."""
        logger.error("Unhandled error: %s", str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred. Please try again."},
        )

    @app.get("/health")
    def health():
        """Health check endpoint"""
        return {"status": "ok"}

    @app.get("/")
    def root():
        """Root endpoint with API info"""
        return {
            "name": "Recipe Finder Backend",
            "version": VERSION,
            "docs": "/docs",
        }

    return app


app = create_app()


def run(host: str = "127.0.0.1", port: int = 9877) -> None:
    """Run the server with compact uvicorn log formatting."""
    log_config = uvicorn.config.LOGGING_CONFIG
    log_config["formatters"]["access"]["fmt"] = "%(asctime)s %(levelprefix)s %(client_addr)s - \"%(request_line)s\" %(status_code)s"
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s %(levelprefix)s %(message)s"
    log_config["formatters"]["access"]["datefmt"] = "%H:%M:%S"
    log_config["formatters"]["default"]["datefmt"] = "%H:%M:%S"

    # One process only: the search session lives in memory.
    uvicorn.run(app, host=host, port=port, log_level="info", log_config=log_config)


def main():
    """Main entry point for the server"""
    parser = argparse.ArgumentParser(description="Recipe Finder Backend Server")
    parser.add_argument("--port", type=int, default=9877, help="Port to run the server on (default: 9877)")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    args = parser.parse_args()

    print(f"Starting Recipe Finder backend on {args.host}:{args.port}")
    run(args.host, args.port)


if __name__ == "__main__":
    main()

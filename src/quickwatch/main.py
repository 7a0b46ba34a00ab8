"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quickwatch import __version__
from quickwatch.api.routes import health, movies, quickwatch, theaters, timeline, watched
from quickwatch.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="QuickWatch API",
    description="Nearby movie showtimes ranked for watching right now",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:5174",
    ],  # Frontend development server
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(quickwatch.router, prefix="/api", tags=["quickwatch"])
app.include_router(theaters.router, prefix="/api", tags=["theaters"])
app.include_router(movies.router, prefix="/api", tags=["movies"])
app.include_router(timeline.router, prefix="/api", tags=["timeline"])
app.include_router(watched.router, prefix="/api", tags=["watched"])


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("quickwatch.main:app", host=settings.api_host, port=settings.api_port)

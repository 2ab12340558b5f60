"""
FastAPI application entry point for the CinePick API.

Run: uvicorn cinepick.api.main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cinepick.api.config import get_api_host, get_api_port, get_log_level
from cinepick.api.routers import users, movies, ratings, watchlist, recommendations, metadata, system
from cinepick.utils.logging_config import setup_logging

app = FastAPI(
    title="CinePick API",
    description="Movie discovery with personalized, trending and because-you-watched recommendations",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(movies.router)
app.include_router(ratings.router)
app.include_router(watchlist.router)
app.include_router(recommendations.router)
app.include_router(metadata.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "CinePick API",
        "docs": "/docs",
        "health": "/api/health",
    }


def run() -> None:
    """Console entry point: configure logging and serve with uvicorn."""
    import uvicorn

    setup_logging(log_file="api.log", level=get_log_level())
    uvicorn.run(app, host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()

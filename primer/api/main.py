"""Main FastAPI application for Python Primer."""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

# Load environment variables using centralized loader
from primer.core.env_loader import ensure_env_loaded
ensure_env_loaded()

from primer.core.config import get_config
from primer.core.constants import PROJECT_NAME, VERSION
from primer.api.routers import demos, games

app = FastAPI(
    title=f"{PROJECT_NAME} API",
    description="Run language walkthrough demos and play tic-tac-toe over HTTP",
    version=VERSION,
)

# Rate limiter lives on the demos router, which owns the limited endpoint
app.state.limiter = demos.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(demos.router, prefix="/api/demos", tags=["demos"])
app.include_router(games.router, prefix="/api/games", tags=["games"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"{PROJECT_NAME} API", "version": VERSION}


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def start_server(host: str = None, port: int = None, reload: bool = False):
    """Start the FastAPI server. Host and port default to the api config."""
    api_config = get_config().api
    uvicorn.run(
        "primer.api.main:app",
        host=host or api_config.host,
        port=port or api_config.port,
        reload=reload,
        log_level="warning",
    )


if __name__ == "__main__":
    start_server()

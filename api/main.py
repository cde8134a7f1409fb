"""
actrgen API - FastAPI Application

Run with: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from actrgen import __version__
from api.routes.generate import router as generate_router
from api.routes.health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("actrgen API starting...")
    yield
    logger.info("actrgen API shutting down...")


app = FastAPI(
    title="actrgen API",
    description="Compile ACT-R models to pyactr scripts and run them",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(generate_router, prefix="/api/v1", tags=["Generation"])


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "actrgen API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

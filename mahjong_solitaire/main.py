"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .api.routes import generate, layouts, sessions

# Get settings
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Mahjong solitaire board generation and game session API",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(layouts.router)
app.include_router(generate.router)
app.include_router(sessions.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Mahjong Solitaire Engine API",
        "endpoints": {
            "layouts": "/api/layouts",
            "generate": "/api/generate",
            "simulate": "/api/simulate",
            "sessions": "/api/sessions",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn

    # Sessions live in process memory, so a single worker
    uvicorn.run(
        "mahjong_solitaire.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

"""
Food Safety Audit Reports - FastAPI Application Entry Point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1.endpoints import health, notifications, reports
from app.logger import logger

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Food safety audit scoring, severity classification and store manager notification",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(reports.router, prefix="/api/v1/reports")
app.include_router(notifications.router, prefix="/api/v1/notifications")

logger.info(f"{settings.APP_NAME} routes registered")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }

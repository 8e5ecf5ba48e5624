from fastapi import FastAPI

from sqlguard.core.config import settings
from sqlguard.controllers import validation_controller
from sqlguard.services import version

# Create FastAPI app
app = FastAPI(title=settings.APP_TITLE, version=version())

# Include routers
app.include_router(validation_controller.router)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "SQLGuard API",
        "docs": "/docs",
        "version": version(),
        "validation_enabled": settings.VALIDATION_ENABLED,
    }

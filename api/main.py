from fastapi import FastAPI
from datetime import datetime, timezone
import logging
import os
import sys


# Add project root to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api.callable_api import create_callable_app
from api.webhook_api import router as webhook_router
from config.settings import settings
import structlog

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))

logger = structlog.get_logger()

API_VERSION = "1.0.0"

app = FastAPI(
    title="VoyaGo Backend Functions",
    description="Itinerary generation, booking search and chatbot fulfillment for VoyaGo",
    version=API_VERSION
)

# Webhook sets its own CORS headers on every response
app.include_router(webhook_router)

# Callable endpoints get CORS from their own sub-application
app.mount("/api", create_callable_app(settings))

@app.get("/")
async def root():
    return {"message": "VoyaGo Backend Functions", "version": API_VERSION}

@app.get("/health")
async def health_check():
    """Liveness endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "translation": "google" if settings.TRANSLATION_ENABLED else "disabled",
        "api_version": API_VERSION
    }

def log_configuration():
    """Log current runtime configuration for debugging"""
    logger.info("🔧 SYSTEM STARTUP - Configuration Check:",
                environment=settings.ENVIRONMENT,
                host=settings.HOST,
                port=settings.PORT)

    if settings.TRANSLATION_ENABLED:
        if settings.GOOGLE_CLOUD_PROJECT:
            logger.info(f"✅ Google Cloud Project: {settings.GOOGLE_CLOUD_PROJECT}")
        else:
            logger.warning("⚠️  GOOGLE_CLOUD_PROJECT not set, relying on Application Default Credentials")
    else:
        logger.warning("⚠️  Translation disabled (TRANSLATION_ENABLED=false)")

    logger.info("✅ CORS origins for callable endpoints", origins=settings.cors_origins)
    logger.info("🚀 Starting VoyaGo Backend Functions...")

if __name__ == "__main__":
    import uvicorn
    
    log_configuration()
    
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

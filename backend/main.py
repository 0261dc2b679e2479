from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import router as v1_router
from app.config import config
from app.schemas import HealthResponse
from app.utils.logging import get_logger

__version__ = "1.0.0"

logger = get_logger()

app = FastAPI(
    title="Palette Studio Backend",
    description="Color conversion and palette suggestions from image samples",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)

logger.info("Palette Studio started", extra={
    "version": __version__,
    "log_level": config.LOG_LEVEL
})


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=__version__)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Palette Studio Backend API",
        "version": __version__,
        "docs": "/docs"
    }

# backend/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routes import upload
from config import get_settings
from utils.errors import register_error_handlers
from utils.logger import setup_logging, get_logger

setup_logging()
log = get_logger(__name__)
settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Resume upload and plain-text extraction for PDF, DOCX and TXT files"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(upload.router)


@app.on_event("startup")
async def startup_event():
    """Startup tasks"""
    log.info(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    log.info(f"Max upload size: {settings.max_upload_bytes} bytes")


@app.on_event("shutdown")
async def shutdown_event():
    log.info("🛑 Shutting down...")


@app.get("/")
async def root():
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "operational",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check"""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "maxUploadBytes": settings.max_upload_bytes,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )

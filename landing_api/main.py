from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging
from landing_api.api.v1.router import api_router
from landing_api.api.site import router as site_router
from landing_api.config.settings import title, description, version, API_V1_STR, HOST, PORT, DEBUG, LOG_LEVEL, CORS_ORIGINS, env_file_loaded
from landing_api.schemas.contact import ContactErrorResponse
from landing_api.services.contact_service import REQUIRED_FIELDS_MESSAGE

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

if env_file_loaded:
    logger.info(f"Loaded environment from {env_file_loaded}")

CONTACT_PATH = f"{API_V1_STR}/contact"

# Create FastAPI app
app = FastAPI(
    title=title,
    description=description,
    version=version,
    openapi_url=f"{API_V1_STR}/openapi.json",
    docs_url=f"{API_V1_STR}/docs",
    redoc_url=f"{API_V1_STR}/redoc",
    debug=DEBUG,
    redirect_slashes=False
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def contact_body_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed contact bodies get the same 400 as missing fields"""
    if request.url.path.rstrip("/") != CONTACT_PATH:
        return await request_validation_exception_handler(request, exc)
    logger.info(f"Rejected malformed contact body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=ContactErrorResponse(error=REQUIRED_FIELDS_MESSAGE).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Global exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": title,
        "version": version,
        "docs": f"{API_V1_STR}/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": time.time()}


# Include API router
app.include_router(api_router, prefix=API_V1_STR)
app.include_router(site_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "landing_api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG
    )

"""
Todo Service - Main application module.
"""
import logging
import time
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .core.database import check_db_connection, init_db
from .core.exceptions import ErrorKind, ServiceError
from .routers import admin, auth, comments, managers, todos, users

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Todo Service",
    description="Task management with managers, comments and weather annotations",
    version=settings.service_version
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_body(request: Request, status_code: int, kind: str, message, context=None) -> dict:
    return {
        "error": {
            "type": kind,
            "status_code": status_code,
            "message": message,
            "path": str(request.url.path),
            "timestamp": time.time(),
            "context": context or {}
        }
    }


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Translate domain errors by kind and status, never by message text"""
    if exc.kind == ErrorKind.UPSTREAM_FAULT:
        logger.warning(f"Upstream fault on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, exc.kind.value, exc.message, exc.context)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Request body/query validation failures are caller faults"""
    return JSONResponse(
        status_code=422,
        content=_error_body(
            request,
            422,
            ErrorKind.CALLER_FAULT.value,
            "Request validation failed",
            {"errors": jsonable_encoder(exc.errors())}
        )
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "Internal server error" if not settings.debug else str(exc)
        )
    )


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info("Starting Todo Service...")
    init_db()
    logger.info("Todo Service startup completed")


# Include routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(todos.router)
app.include_router(managers.router)
app.include_router(comments.router)
app.include_router(admin.router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "message": "Todo Service is operational"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    db_healthy = check_db_connection()
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "healthy" if db_healthy else "unhealthy",
        "database": "connected" if db_healthy else "disconnected",
        "timestamp": time.time()
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("todo_service.main:app", host="0.0.0.0", port=8000, reload=settings.debug)

"""
Course Feedback Main Application
FastAPI application with clean architecture and dependency injection
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time
from uuid import uuid4

from course_feedback.core.config import get_settings, validate_configuration
from course_feedback.core.dependencies import (
    cleanup_resources,
    get_course_repository,
    get_service_health,
)
from course_feedback.api.v1 import courses, feedback, analytics
from course_feedback.models.requests import ErrorResponse, HealthCheckResponse
from course_feedback.repositories.interfaces import CourseRepositoryInterface

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment.value}")

    # Validate configuration
    try:
        validate_configuration(settings)
        logger.info("Configuration validation passed")
    except ValueError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application")
    await cleanup_resources()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Student course feedback: ratings, comments and analytics",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests for monitoring"""
    start_time = time.time()

    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    request.state.request_id = request_id

    logger.info(
        f"Request {request_id}: {request.method} {request.url.path} "
        f"from {request.client.host if request.client else 'unknown'}"
    )

    try:
        response = await call_next(request)

        process_time = time.time() - start_time

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            f"Response {request_id}: {response.status_code} in {process_time:.3f}s"
        )

        return response

    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"Request {request_id} failed after {process_time:.3f}s: {str(e)}")

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                message="An unexpected error occurred",
                request_id=request_id,
            ).model_dump(mode="json"),
            headers={"X-Request-ID": request_id},
        )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions"""
    request_id = getattr(request.state, "request_id", "unknown")

    logger.error(
        f"Unhandled exception in request {request_id}: {str(exc)}", exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred" if not settings.debug else str(exc),
            request_id=request_id,
        ).model_dump(mode="json"),
    )


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.app_name} v{settings.app_version}",
        "environment": settings.environment.value,
        "status": "healthy",
        "docs_url": "/docs" if settings.debug else "disabled",
    }


# Health check endpoint
@app.get("/health", response_model=HealthCheckResponse)
async def health_check(
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
):
    """Health check endpoint"""
    services_health = await get_service_health(course_repository)

    overall_status = "healthy"
    for service_status in services_health.values():
        if not service_status.startswith("healthy"):
            overall_status = "degraded"
            break

    return HealthCheckResponse(
        status=overall_status,
        version=settings.app_version,
        environment=settings.environment.value,
        services=services_health,
    )


# Include API routers
app.include_router(
    courses.router, prefix=settings.api_prefix + "/courses", tags=["Courses"]
)

app.include_router(
    feedback.router, prefix=settings.api_prefix + "/feedback", tags=["Feedback"]
)

app.include_router(
    analytics.router, prefix=settings.api_prefix + "/analytics", tags=["Analytics"]
)


# Additional endpoints for development
if settings.debug:

    @app.get("/debug/config")
    async def debug_config():
        """Debug endpoint to view configuration (development only)"""
        return {
            "app_name": settings.app_name,
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api_prefix": settings.api_prefix,
            "seed_sample_data": settings.seed_sample_data,
            "seed_data_dir": settings.seed_data_dir,
        }


def run():
    """Development server entry point"""
    import uvicorn

    uvicorn.run(
        "course_feedback.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )


if __name__ == "__main__":
    run()

"""
Dependency injection setup for Course Feedback
Manages the store lifecycle and provides clean dependency injection
"""

from functools import lru_cache
from uuid import uuid4
from fastapi import Depends, Request
import logging

from .config import get_settings
from ..services.interfaces import AnalyticsServiceInterface
from ..services.analytics_service import AnalyticsService

# Import repositories
from ..repositories.interfaces import CourseRepositoryInterface
from ..repositories.memory_course_repository import MemoryCourseRepository

logger = logging.getLogger(__name__)


# Repository Dependencies
@lru_cache()
def get_course_repository() -> CourseRepositoryInterface:
    """Get the course repository, created once per process"""
    # A multi-worker deployment needs a shared transactional store here
    settings = get_settings()
    repository = MemoryCourseRepository(
        seed_sample_data=settings.seed_sample_data,
        seed_data_dir=settings.seed_data_dir,
    )
    logger.info(f"Course repository ready ({type(repository).__name__})")
    return repository


# Service Dependencies
def get_analytics_service(
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
) -> AnalyticsServiceInterface:
    """Get analytics service bound to the current repository"""
    return AnalyticsService(course_repository)


# Health Check Dependencies
async def get_service_health(
    course_repository: CourseRepositoryInterface = None,
) -> dict:
    """Get health status of all services"""
    health_status = {
        "course_repository": "unknown",
    }

    try:
        repository = course_repository or get_course_repository()
        courses, feedback = await repository.snapshot()
        health_status["course_repository"] = (
            f"healthy: {len(courses)} courses, {len(feedback)} feedback"
        )
    except Exception as e:
        health_status["course_repository"] = f"unhealthy: {str(e)}"

    return health_status


# Cleanup function for application shutdown
async def cleanup_resources():
    """Cleanup resources on application shutdown"""
    get_course_repository.cache_clear()


async def get_request_id(request: Request) -> str:
    """Generate or get request ID for tracking"""
    request_id = getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID"
    )
    if not request_id:
        request_id = str(uuid4())
    return request_id


# Logging context dependency
async def get_logging_context(
    request: Request,
    request_id: str = Depends(get_request_id),
) -> dict:
    """Get logging context for request tracking"""
    context = {
        "request_id": request_id,
        "client": request.client.host if request.client else "unknown",
    }
    return context

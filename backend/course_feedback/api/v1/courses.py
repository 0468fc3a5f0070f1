# api/v1/courses.py
"""
Course catalog API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional, List
import logging

from ...core.dependencies import get_course_repository, get_logging_context
from ...models.course import (
    Course,
    CourseCreate,
    CourseFilter,
    CourseUpdate,
    CourseWithStats,
)
from ...models.feedback import Feedback, newest_first
from ...models.requests import DeleteResponse
from ...repositories.interfaces import CourseRepositoryInterface
from ...repositories.exceptions import DuplicateCourseCodeError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[CourseWithStats])
async def list_courses(
    search: Optional[str] = Query(None, max_length=200),
    department: Optional[str] = Query(None, max_length=100),
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
):
    """
    List courses with their average rating and review count

    - **search**: case-insensitive match on name, code or instructor
    - **department**: exact department name
    """
    filters = CourseFilter(search=search or None, department=department or None)
    return await course_repository.list_courses_with_stats(filters)


@router.get("/departments", response_model=List[str])
async def list_departments(
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
):
    """Distinct departments in the catalog"""
    return await course_repository.list_departments()


@router.get("/{course_id}", response_model=Course)
async def get_course(
    course_id: str,
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
):
    """Get a single course"""
    course = await course_repository.get_course(course_id)
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Course not found"
        )
    return course


@router.get("/{course_id}/stats", response_model=CourseWithStats)
async def get_course_stats(
    course_id: str,
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
):
    """Get a single course with its rating stats"""
    course = await course_repository.get_course_with_stats(course_id)
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Course not found"
        )
    return course


@router.get("/{course_id}/feedback", response_model=List[Feedback])
async def list_course_feedback(
    course_id: str,
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
):
    """List feedback for a course, newest first"""
    if not await course_repository.get_course(course_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Course not found"
        )

    feedback = await course_repository.list_feedback_by_course(course_id)
    return newest_first(feedback)


@router.post("/", response_model=Course, status_code=status.HTTP_201_CREATED)
async def create_course(
    request: CourseCreate,
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
    logging_context: dict = Depends(get_logging_context),
):
    """Add a course to the catalog"""
    try:
        course = await course_repository.create_course(request)
        logger.info(
            f"Created course {course.code} ({course.id})", extra=logging_context
        )
        return course

    except DuplicateCourseCodeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating course: {e}", extra=logging_context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create course",
        )


@router.patch("/{course_id}", response_model=Course)
async def update_course(
    course_id: str,
    request: CourseUpdate,
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
    logging_context: dict = Depends(get_logging_context),
):
    """Update some fields of a course"""
    try:
        course = await course_repository.update_course(
            course_id, request.model_dump(exclude_unset=True)
        )
        if not course:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Course not found"
            )

        logger.info(f"Updated course {course_id}", extra=logging_context)
        return course

    except HTTPException:
        raise
    except DuplicateCourseCodeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating course {course_id}: {e}", extra=logging_context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update course",
        )


@router.delete("/{course_id}", response_model=DeleteResponse)
async def delete_course(
    course_id: str,
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
    logging_context: dict = Depends(get_logging_context),
):
    """Delete a course and all feedback submitted for it; reports whether it existed"""
    deleted = await course_repository.delete_course(course_id)
    if deleted:
        logger.info(f"Deleted course {course_id}", extra=logging_context)
    else:
        logger.info(f"Delete of unknown course {course_id}", extra=logging_context)
    return DeleteResponse(deleted=deleted)

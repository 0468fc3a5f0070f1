# api/v1/feedback.py
"""
Feedback submission API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from ...core.dependencies import get_course_repository, get_logging_context
from ...models.feedback import Feedback, FeedbackCreate, newest_first
from ...repositories.interfaces import CourseRepositoryInterface
from ...repositories.exceptions import UnknownCourseError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[Feedback])
async def list_feedback(
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
):
    """List all feedback, newest first"""
    feedback = await course_repository.list_feedback()
    return newest_first(feedback)


@router.post("/", response_model=Feedback, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    request: FeedbackCreate,
    course_repository: CourseRepositoryInterface = Depends(get_course_repository),
    logging_context: dict = Depends(get_logging_context),
):
    """
    Submit feedback for a course

    - **courseId**: course being rated
    - **rating**: whole stars, 1 to 5
    - **comment**: optional, at most 500 characters
    - **studentName**: optional, defaults to "Anonymous"
    """
    try:
        feedback = await course_repository.create_feedback(request)
        logger.info(
            f"Feedback {feedback.id} ({feedback.rating} stars) for course "
            f"{feedback.course_id}",
            extra=logging_context,
        )
        return feedback

    except UnknownCourseError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        )
    except Exception as e:
        logger.error(f"Error submitting feedback: {e}", extra=logging_context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit feedback",
        )

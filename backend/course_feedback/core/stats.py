# core/stats.py
"""
Rating arithmetic shared by the repository and the analytics service
"""
import math
from typing import Iterable, List

from ..models.course import Course, CourseWithStats
from ..models.feedback import Feedback


def round_rating(value: float) -> float:
    """Round to one decimal place, halves away from zero.

    The value is scaled by ten, rounded, then scaled back, so 4.25 -> 4.3
    and 4.35 -> 4.4 (Python's built-in round() would use banker's rounding).
    """
    scaled = math.floor(abs(value) * 10 + 0.5)
    return math.copysign(scaled, value) / 10


def average_rating(ratings: Iterable[int]) -> float:
    """Rounded mean of ratings, 0 when there are none"""
    ratings = list(ratings)
    if not ratings:
        return 0.0
    return round_rating(sum(ratings) / len(ratings))


def course_with_stats(course: Course, feedback: List[Feedback]) -> CourseWithStats:
    """Join a course with the feedback that references it"""
    return CourseWithStats(
        **course.model_dump(),
        average_rating=average_rating(fb.rating for fb in feedback),
        total_reviews=len(feedback),
    )

# services/analytics_service.py
"""
Analytics service implementation

Every view is a fold over one consistent snapshot of the repository, taken
per call. Nothing is cached, so there is nothing to invalidate.
"""
from typing import Dict, List
import logging

from .interfaces.analytics_service import AnalyticsServiceInterface
from ..core.stats import average_rating
from ..models.analytics import DepartmentAnalytics, OverallStats, RatingDistribution
from ..models.course import Course
from ..models.feedback import Feedback, MIN_RATING, MAX_RATING
from ..repositories.interfaces import CourseRepositoryInterface

logger = logging.getLogger(__name__)


def department_rollup(
    courses: List[Course], feedback: List[Feedback]
) -> List[DepartmentAnalytics]:
    """Group courses by department and aggregate their feedback.

    Departments appear once per distinct value, sorted by average rating
    descending; ties keep the order in which departments were first seen.
    Feedback pointing at a course outside ``courses`` is ignored.
    """
    department_courses: Dict[str, List[Course]] = {}
    course_department: Dict[str, str] = {}
    for course in courses:
        department_courses.setdefault(course.department, []).append(course)
        course_department[course.id] = course.department

    department_ratings: Dict[str, List[int]] = {
        department: [] for department in department_courses
    }
    for fb in feedback:
        department = course_department.get(fb.course_id)
        if department is not None:
            department_ratings[department].append(fb.rating)

    analytics = [
        DepartmentAnalytics(
            department=department,
            course_count=len(dept_courses),
            average_rating=average_rating(department_ratings[department]),
            total_reviews=len(department_ratings[department]),
        )
        for department, dept_courses in department_courses.items()
    ]

    # sorted() is stable, also with reverse=True
    return sorted(analytics, key=lambda row: row.average_rating, reverse=True)


def rating_distribution(feedback: List[Feedback]) -> List[RatingDistribution]:
    """Histogram of ratings, always one bucket per rating value"""
    counts = {rating: 0 for rating in range(MIN_RATING, MAX_RATING + 1)}
    for fb in feedback:
        counts[fb.rating] += 1

    return [
        RatingDistribution(rating=rating, count=count)
        for rating, count in counts.items()
    ]


def overall_stats(courses: List[Course], feedback: List[Feedback]) -> OverallStats:
    return OverallStats(
        total_reviews=len(feedback),
        average_rating=average_rating(fb.rating for fb in feedback),
        active_courses=len(courses),
    )


class AnalyticsService(AnalyticsServiceInterface):
    """Implementation of the analytics service"""

    def __init__(self, course_repository: CourseRepositoryInterface):
        self.course_repository = course_repository

    async def get_overall_stats(self) -> OverallStats:
        courses, feedback = await self.course_repository.snapshot()
        stats = overall_stats(courses, feedback)
        logger.debug(
            f"Overall stats: {stats.total_reviews} reviews over "
            f"{stats.active_courses} courses"
        )
        return stats

    async def get_department_analytics(self) -> List[DepartmentAnalytics]:
        courses, feedback = await self.course_repository.snapshot()
        return department_rollup(courses, feedback)

    async def get_rating_distribution(self) -> List[RatingDistribution]:
        _, feedback = await self.course_repository.snapshot()
        return rating_distribution(feedback)

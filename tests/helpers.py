"""
Builders shared by repository, service and API tests.
"""

from course_feedback.models.course import CourseCreate
from course_feedback.models.feedback import FeedbackCreate


def make_course(code="CS 101", department="Computer Science", **overrides) -> CourseCreate:
    fields = {
        "code": code,
        "name": f"Course {code}",
        "instructor": "Prof. Test",
        "department": department,
    }
    fields.update(overrides)
    return CourseCreate(**fields)


async def add_course(repository, code="CS 101", department="Computer Science", ratings=()):
    """Create a course and submit one feedback entry per rating."""
    course = await repository.create_course(make_course(code, department))
    for rating in ratings:
        await repository.create_feedback(
            FeedbackCreate(course_id=course.id, rating=rating)
        )
    return course

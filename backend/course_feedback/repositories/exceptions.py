# repositories/exceptions.py
"""
Errors raised by course repositories when a write conflicts with stored state.
Missing records are not errors: lookups return None and deletes return False.
"""


class CourseRepositoryError(ValueError):
    """Base class for rejected repository writes"""

    pass


class DuplicateCourseCodeError(CourseRepositoryError):
    """Another course already uses this code"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Course with code {code!r} already exists")


class UnknownCourseError(CourseRepositoryError):
    """Feedback referenced a course that is not in the catalog"""

    def __init__(self, course_id: str):
        self.course_id = course_id
        super().__init__(f"Course with ID {course_id!r} does not exist")

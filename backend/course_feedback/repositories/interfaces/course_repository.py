# repositories/interfaces/course_repository.py
"""
Course repository interface
"""
from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any, Tuple
from ...models.course import Course, CourseCreate, CourseFilter, CourseWithStats
from ...models.feedback import Feedback, FeedbackCreate


class CourseRepositoryInterface(ABC):
    """Abstract interface for course and feedback data operations"""

    @abstractmethod
    async def list_courses(self, filters: Optional[CourseFilter] = None) -> List[Course]:
        """List courses in insertion order"""
        pass

    @abstractmethod
    async def list_courses_with_stats(
        self, filters: Optional[CourseFilter] = None
    ) -> List[CourseWithStats]:
        """List courses joined with their rating average and review count"""
        pass

    @abstractmethod
    async def get_course(self, course_id: str) -> Optional[Course]:
        """Get course by ID"""
        pass

    @abstractmethod
    async def get_course_with_stats(self, course_id: str) -> Optional[CourseWithStats]:
        """Get a single course joined with its stats"""
        pass

    @abstractmethod
    async def list_departments(self) -> List[str]:
        """Distinct department values in first-seen order"""
        pass

    @abstractmethod
    async def create_course(self, course: CourseCreate) -> Course:
        """Create a new course with a generated ID"""
        pass

    @abstractmethod
    async def update_course(
        self, course_id: str, updates: Dict[str, Any]
    ) -> Optional[Course]:
        """Merge updates onto an existing course"""
        pass

    @abstractmethod
    async def delete_course(self, course_id: str) -> bool:
        """Delete a course together with all of its feedback"""
        pass

    # Feedback operations
    @abstractmethod
    async def list_feedback(self) -> List[Feedback]:
        """List all feedback"""
        pass

    @abstractmethod
    async def list_feedback_by_course(self, course_id: str) -> List[Feedback]:
        """List feedback referencing a course"""
        pass

    @abstractmethod
    async def create_feedback(self, feedback: FeedbackCreate) -> Feedback:
        """Store feedback with a generated ID and creation timestamp"""
        pass

    @abstractmethod
    async def snapshot(self) -> Tuple[List[Course], List[Feedback]]:
        """Consistent copy of both collections, taken under one lock"""
        pass

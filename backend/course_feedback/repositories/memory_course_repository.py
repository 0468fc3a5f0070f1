# repositories/memory_course_repository.py
"""
In-memory course repository implementation for development/testing
"""
import pandas as pd
import os
import logging
from typing import Optional, List, Dict, Any, Tuple
from datetime import datetime, UTC
from uuid import uuid4
import threading

from .interfaces.course_repository import CourseRepositoryInterface
from .exceptions import DuplicateCourseCodeError, UnknownCourseError
from ..core.stats import course_with_stats
from ..models.course import (
    Course,
    CourseCreate,
    CourseFilter,
    CourseWithStats,
    DEFAULT_SEMESTER,
)
from ..models.feedback import Feedback, FeedbackCreate, ANONYMOUS_STUDENT

logger = logging.getLogger(__name__)

# Fields a caller may change through update_course
UPDATABLE_FIELDS = ("code", "name", "instructor", "department", "description", "semester")


def _utc_timestamp(value: str) -> datetime:
    """Parse a seed timestamp; naive values are taken as UTC"""
    timestamp = pd.Timestamp(value)
    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize("UTC")
    else:
        timestamp = timestamp.tz_convert("UTC")
    return timestamp.to_pydatetime()


class MemoryCourseRepository(CourseRepositoryInterface):
    """In-memory implementation of course repository.

    Courses and feedback live in two dicts keyed by generated ID and share one
    lock, so a cascading delete is never observed half done.
    """

    def __init__(self, seed_sample_data: bool = False, seed_data_dir: Optional[str] = None):
        self.courses: Dict[str, Course] = {}
        self.feedback: Dict[str, Feedback] = {}
        self.lock = threading.RLock()

        if seed_data_dir:
            self._load_seed_data(seed_data_dir)
        elif seed_sample_data:
            self._create_sample_data()

    def _load_seed_data(self, seed_data_dir: str):
        """Load courses.csv and feedback.csv from a directory"""
        courses_path = os.path.join(seed_data_dir, "courses.csv")
        feedback_path = os.path.join(seed_data_dir, "feedback.csv")
        try:
            if not os.path.exists(courses_path):
                logger.warning(
                    f"No courses.csv in {seed_data_dir}, using built-in sample data"
                )
                self._create_sample_data()
                return

            courses_df = pd.read_csv(courses_path, dtype=str, keep_default_na=False)
            for _, row in courses_df.iterrows():
                course = Course(
                    id=row.get("id") or str(uuid4()),
                    code=row["code"],
                    name=row["name"],
                    instructor=row["instructor"],
                    department=row["department"],
                    description=row.get("description") or None,
                    semester=row.get("semester") or DEFAULT_SEMESTER,
                )
                self.courses[course.id] = course

            if os.path.exists(feedback_path):
                feedback_df = pd.read_csv(
                    feedback_path, dtype=str, keep_default_na=False
                )
                for _, row in feedback_df.iterrows():
                    if row["course_id"] not in self.courses:
                        logger.warning(
                            f"Skipping seed feedback for unknown course {row['course_id']}"
                        )
                        continue
                    created_at = row.get("created_at")
                    feedback = Feedback(
                        id=row.get("id") or str(uuid4()),
                        course_id=row["course_id"],
                        rating=int(row["rating"]),
                        comment=row.get("comment") or None,
                        student_name=row.get("student_name") or ANONYMOUS_STUDENT,
                        created_at=(
                            _utc_timestamp(created_at)
                            if created_at
                            else datetime.now(UTC)
                        ),
                    )
                    self.feedback[feedback.id] = feedback

            logger.info(
                f"Loaded {len(self.courses)} courses and {len(self.feedback)} "
                f"feedback entries from {seed_data_dir}"
            )

        except Exception as e:
            logger.error(f"Error loading seed data from {seed_data_dir}: {e}")
            self.courses.clear()
            self.feedback.clear()
            self._create_sample_data()

    def _create_sample_data(self):
        """Create sample courses and feedback for development"""
        sample_courses = [
            Course(
                id="cs301",
                code="CS 301",
                name="Data Structures & Algorithms",
                instructor="Prof. Amit Kumar",
                department="Computer Science",
                description="Comprehensive study of advanced data structures and algorithm optimization techniques",
            ),
            Course(
                id="math210",
                code="MATH 210",
                name="Linear Algebra",
                instructor="Prof. Sweta Sharma",
                department="Mathematics",
                description="Mathematical foundations covering vector spaces, eigenvalues, and matrix operations",
            ),
            Course(
                id="phys150",
                code="PHYS 150",
                name="General Physics I",
                instructor="Prof. Satyam Patel",
                department="Physics",
                description="Fundamental physics principles including mechanics, energy, and thermodynamics",
            ),
            Course(
                id="cs250",
                code="CS 250",
                name="Database Systems",
                instructor="Prof. Shiv Gupta",
                department="Computer Science",
                description="Relational database concepts, normalization, and query optimization strategies",
            ),
            Course(
                id="eng101",
                code="ENG 101",
                name="Academic Writing",
                instructor="Prof. Ayush Singh",
                department="English",
                description="Development of critical writing and analytical thinking skills for academic contexts",
            ),
            Course(
                id="hist200",
                code="HIST 200",
                name="World History",
                instructor="Prof. Himesh Verma",
                department="History",
                description="Exploration of global historical patterns and cultural developments across civilizations",
            ),
        ]

        # (course_id, rating, comment, student_name)
        sample_feedback = [
            ("cs301", 5, "Outstanding course with challenging algorithmic problems", "Ravi Sharma"),
            ("cs301", 4, "Excellent content but requires dedicated study time", "Priya Patel"),
            ("cs301", 4, "Prof Kumar explains complex concepts clearly", "Arjun Singh"),
            ("cs301", 5, "Most comprehensive CS course in the curriculum", "Anjali Gupta"),
            ("cs301", 3, "Challenging but builds strong foundation", "Vikram Yadav"),
            ("math210", 4, "Well organized course with clear learning objectives", "Neha Joshi"),
            ("math210", 3, "Mathematics is challenging but professor is supportive", "Karan Mehta"),
            ("math210", 4, "Excellent problem sets and practice materials", "Divya Reddy"),
            ("math210", 4, "Comprehensive coverage of all important topics", "Rohit Kumar"),
            ("phys150", 5, "Exceptional teaching and course design", "Kavya Nair"),
            ("phys150", 4, "Physics principles explained with practical examples", "Aditya Verma"),
            ("phys150", 5, "Laboratory sessions are incredibly engaging", "Shreya Agarwal"),
            ("phys150", 4, "Rigorous but maintains student interest", "Deepak Mishra"),
            ("cs250", 4, "Solid introduction to database management systems", "Pooja Shah"),
            ("cs250", 4, "Hands-on projects enhance learning experience", "Manish Tiwari"),
            ("cs250", 4, "SQL knowledge gained is practically applicable", "Suman Das"),
            ("eng101", 3, "Fundamental course for academic writing skills", "Isha Bansal"),
            ("eng101", 4, "Significant improvement in writing abilities", "Gaurav Sinha"),
            ("eng101", 3, "Constructive feedback helps in skill development", "Nisha Rao"),
            ("hist200", 4, "Intriguing insights into world civilizations", "Rahul Jain"),
            ("hist200", 5, "Prof Verma makes history come alive in classroom", "Meera Chopra"),
            ("hist200", 4, "Interactive discussions enhance understanding", "Akash Pandey"),
        ]

        for course in sample_courses:
            self.courses[course.id] = course

        for course_id, rating, comment, student_name in sample_feedback:
            feedback = Feedback(
                id=str(uuid4()),
                course_id=course_id,
                rating=rating,
                comment=comment,
                student_name=student_name,
            )
            self.feedback[feedback.id] = feedback

        logger.info(
            f"Created {len(self.courses)} sample courses and "
            f"{len(self.feedback)} sample feedback entries"
        )

    def _find_by_code(self, code: str) -> Optional[Course]:
        for course in self.courses.values():
            if course.code == code:
                return course
        return None

    def _feedback_for(self, course_id: str) -> List[Feedback]:
        return [fb for fb in self.feedback.values() if fb.course_id == course_id]

    def _apply_filter(self, courses: List[Course], filters: CourseFilter) -> List[Course]:
        """Apply filters to course list"""
        filtered_courses = courses

        if filters.search:
            term = filters.search.lower()
            filtered_courses = [
                c
                for c in filtered_courses
                if term in c.name.lower()
                or term in c.code.lower()
                or term in c.instructor.lower()
            ]

        if filters.department:
            filtered_courses = [
                c for c in filtered_courses if c.department == filters.department
            ]

        return filtered_courses

    async def list_courses(self, filters: Optional[CourseFilter] = None) -> List[Course]:
        """List courses in insertion order"""
        with self.lock:
            courses_list = [c.model_copy() for c in self.courses.values()]

        if filters:
            courses_list = self._apply_filter(courses_list, filters)
        return courses_list

    async def list_courses_with_stats(
        self, filters: Optional[CourseFilter] = None
    ) -> List[CourseWithStats]:
        """List courses joined with their rating average and review count"""
        with self.lock:
            courses_list = list(self.courses.values())
            if filters:
                courses_list = self._apply_filter(courses_list, filters)
            return [
                course_with_stats(course, self._feedback_for(course.id))
                for course in courses_list
            ]

    async def get_course(self, course_id: str) -> Optional[Course]:
        """Get course by ID"""
        with self.lock:
            course = self.courses.get(course_id)
            return course.model_copy() if course else None

    async def get_course_with_stats(self, course_id: str) -> Optional[CourseWithStats]:
        """Get a single course joined with its stats"""
        with self.lock:
            course = self.courses.get(course_id)
            if course is None:
                return None
            return course_with_stats(course, self._feedback_for(course_id))

    async def list_departments(self) -> List[str]:
        """Distinct department values in first-seen order"""
        with self.lock:
            return list(dict.fromkeys(c.department for c in self.courses.values()))

    async def create_course(self, course: CourseCreate) -> Course:
        """Create a new course"""
        with self.lock:
            if self._find_by_code(course.code) is not None:
                raise DuplicateCourseCodeError(course.code)

            new_course = Course(
                id=str(uuid4()),
                code=course.code,
                name=course.name,
                instructor=course.instructor,
                department=course.department,
                description=course.description or None,
                semester=course.semester or DEFAULT_SEMESTER,
            )
            self.courses[new_course.id] = new_course
            return new_course.model_copy()

    async def update_course(
        self, course_id: str, updates: Dict[str, Any]
    ) -> Optional[Course]:
        """Update course information"""
        with self.lock:
            if course_id not in self.courses:
                return None

            course = self.courses[course_id]
            changes = {
                field: value
                for field, value in updates.items()
                if field in UPDATABLE_FIELDS
            }

            new_code = changes.get("code")
            if new_code is not None and new_code != course.code:
                other = self._find_by_code(new_code)
                if other is not None and other.id != course_id:
                    raise DuplicateCourseCodeError(new_code)

            updated_course = course.model_copy(update=changes)
            self.courses[course_id] = updated_course
            return updated_course.model_copy()

    async def delete_course(self, course_id: str) -> bool:
        """Delete a course and cascade to its feedback"""
        with self.lock:
            if course_id not in self.courses:
                return False

            del self.courses[course_id]
            orphaned = [
                fb_id
                for fb_id, fb in self.feedback.items()
                if fb.course_id == course_id
            ]
            for fb_id in orphaned:
                del self.feedback[fb_id]

            logger.info(
                f"Deleted course {course_id} and {len(orphaned)} feedback entries"
            )
            return True

    # Feedback operations
    async def list_feedback(self) -> List[Feedback]:
        """List all feedback in insertion order"""
        with self.lock:
            return [fb.model_copy() for fb in self.feedback.values()]

    async def list_feedback_by_course(self, course_id: str) -> List[Feedback]:
        """List feedback referencing a course"""
        with self.lock:
            return [fb.model_copy() for fb in self._feedback_for(course_id)]

    async def create_feedback(self, feedback: FeedbackCreate) -> Feedback:
        """Store feedback for an existing course"""
        with self.lock:
            if feedback.course_id not in self.courses:
                raise UnknownCourseError(feedback.course_id)

            new_feedback = Feedback(
                id=str(uuid4()),
                course_id=feedback.course_id,
                rating=feedback.rating,
                comment=feedback.comment or None,
                student_name=feedback.student_name or ANONYMOUS_STUDENT,
                created_at=datetime.now(UTC),
            )
            self.feedback[new_feedback.id] = new_feedback
            return new_feedback.model_copy()

    async def snapshot(self) -> Tuple[List[Course], List[Feedback]]:
        """Consistent copy of both collections"""
        with self.lock:
            return (
                [c.model_copy() for c in self.courses.values()],
                [fb.model_copy() for fb in self.feedback.values()],
            )

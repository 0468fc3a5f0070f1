# models/course.py
"""
Course-related data models
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional

DEFAULT_SEMESTER = "Fall 2024"


class Course(BaseModel):
    """Core course model"""

    id: str
    code: str  # e.g., "CS 301"
    name: str
    instructor: str
    department: str
    description: Optional[str] = None
    semester: str = DEFAULT_SEMESTER

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class CourseWithStats(Course):
    """Course enriched with its feedback statistics"""

    average_rating: float = 0
    total_reviews: int = 0


class CourseFilter(BaseModel):
    """Filters for the course listing"""

    search: Optional[str] = None  # matches name, code or instructor
    department: Optional[str] = None


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CourseCreate(BaseModel):
    """Payload for adding a course to the catalog"""

    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=200)
    instructor: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)
    semester: Optional[str] = Field(None, max_length=50)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("code", "name", "instructor", "department")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        """Required text fields cannot be whitespace only"""
        if not v.strip():
            raise ValueError("Field cannot be empty or whitespace only")
        return v.strip()

    @field_validator("description", "semester")
    @classmethod
    def validate_optional_text(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class CourseUpdate(BaseModel):
    """Partial course update; only fields sent by the caller are applied"""

    code: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    instructor: Optional[str] = Field(None, min_length=1, max_length=200)
    department: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)
    semester: Optional[str] = Field(None, min_length=1, max_length=50)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("code", "name", "instructor", "department", "semester")
    @classmethod
    def validate_present_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("Field cannot be null")
        if not v.strip():
            raise ValueError("Field cannot be empty or whitespace only")
        return v.strip()

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

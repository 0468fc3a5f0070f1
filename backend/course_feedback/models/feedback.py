# models/feedback.py
"""
Feedback-related data models
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime, UTC

MIN_RATING = 1
MAX_RATING = 5
MAX_COMMENT_LENGTH = 500
ANONYMOUS_STUDENT = "Anonymous"


class Feedback(BaseModel):
    """One student's rating for one course"""

    id: str
    course_id: str
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: Optional[str] = Field(None, max_length=MAX_COMMENT_LENGTH)
    student_name: str = ANONYMOUS_STUDENT
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class FeedbackCreate(BaseModel):
    """Payload for submitting feedback"""

    course_id: str = Field(..., min_length=1)
    # Whole numbers only: booleans and 4.0 are rejected
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, strict=True)
    comment: Optional[str] = Field(None, max_length=MAX_COMMENT_LENGTH)
    student_name: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, v: Optional[str]) -> Optional[str]:
        """Empty comments are stored as no comment"""
        if not v:
            return None
        return v

    @field_validator("student_name")
    @classmethod
    def validate_student_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


def newest_first(feedback: List[Feedback]) -> List[Feedback]:
    """Order by creation time descending; equal timestamps put the later insert first"""
    ordered = sorted(
        enumerate(feedback), key=lambda pair: (pair[1].created_at, pair[0]), reverse=True
    )
    return [fb for _, fb in ordered]

# models/analytics.py
"""
Derived analytics views. These are computed per request and never stored.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class DepartmentAnalytics(BaseModel):
    """Rollup of all courses sharing a department value"""

    department: str
    course_count: int
    average_rating: float
    total_reviews: int
    # Rating movement needs historical snapshots; None means not computed
    trend: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RatingDistribution(BaseModel):
    """Feedback count for a single rating value"""

    rating: int = Field(..., ge=1, le=5)
    count: int = 0


class OverallStats(BaseModel):
    """Catalog-wide KPIs"""

    total_reviews: int
    average_rating: float
    active_courses: int
    # Survey completion is not tracked; None means not computed
    response_rate: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

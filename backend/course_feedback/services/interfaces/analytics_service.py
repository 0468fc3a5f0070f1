# services/interfaces/analytics_service.py
"""
Analytics service interface
"""
from abc import ABC, abstractmethod
from typing import List
from ...models.analytics import DepartmentAnalytics, OverallStats, RatingDistribution


class AnalyticsServiceInterface(ABC):
    """Abstract interface for feedback analytics"""

    @abstractmethod
    async def get_overall_stats(self) -> OverallStats:
        """Catalog-wide review count, average rating and course count"""
        pass

    @abstractmethod
    async def get_department_analytics(self) -> List[DepartmentAnalytics]:
        """Per-department rollups, best rated first"""
        pass

    @abstractmethod
    async def get_rating_distribution(self) -> List[RatingDistribution]:
        """Feedback counts for ratings 1 through 5"""
        pass

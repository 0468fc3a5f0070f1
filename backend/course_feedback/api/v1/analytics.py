# api/v1/analytics.py
"""
Analytics API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from ...core.dependencies import get_analytics_service
from ...models.analytics import DepartmentAnalytics, OverallStats, RatingDistribution
from ...services.interfaces import AnalyticsServiceInterface

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/overview", response_model=OverallStats)
async def get_overview(
    analytics_service: AnalyticsServiceInterface = Depends(get_analytics_service),
):
    """Total reviews, overall average rating and active course count"""
    try:
        return await analytics_service.get_overall_stats()
    except Exception as e:
        logger.error(f"Error computing overall stats: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute overall statistics",
        )


@router.get("/departments", response_model=List[DepartmentAnalytics])
async def get_departments(
    analytics_service: AnalyticsServiceInterface = Depends(get_analytics_service),
):
    """Department rollups, highest average rating first"""
    try:
        return await analytics_service.get_department_analytics()
    except Exception as e:
        logger.error(f"Error computing department analytics: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute department analytics",
        )


@router.get("/rating-distribution", response_model=List[RatingDistribution])
async def get_rating_distribution(
    analytics_service: AnalyticsServiceInterface = Depends(get_analytics_service),
):
    """Feedback counts for each star rating, 1 through 5"""
    try:
        return await analytics_service.get_rating_distribution()
    except Exception as e:
        logger.error(f"Error computing rating distribution: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute rating distribution",
        )

"""
Service interfaces package
"""
from .analytics_service import AnalyticsServiceInterface

__all__ = [
    "AnalyticsServiceInterface",
]

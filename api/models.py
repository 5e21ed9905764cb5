"""
Pydantic models for API responses.
Auto-generates OpenAPI documentation.
"""

from pydantic import BaseModel
from typing import List, Optional


class StatisticsResponse(BaseModel):
    """Monthly totals. totalSaleAmount is null when no sale matches the month."""
    totalItems: int
    totalSaleAmount: Optional[float] = None
    totalSoldItems: int
    totalNotSoldItems: int


class PriceRangeItem(BaseModel):
    priceRange: str
    itemCount: int


class CategoryItem(BaseModel):
    category: Optional[str] = None
    itemCount: int


class CombinedResponse(BaseModel):
    """Statistics, bar chart and pie chart for the same month."""
    statistics: StatisticsResponse
    barChart: List[PriceRangeItem]
    pieChart: List[CategoryItem]


class HealthResponse(BaseModel):
    """API health check response."""
    service: str
    version: str
    status: str
    database_path: str
    database_stats: dict


class ErrorResponse(BaseModel):
    error: str

from pydantic import BaseModel

from .applications import CamelModel


class GenerationCount(BaseModel):
    generation: int
    count: int


class MonthlyCount(BaseModel):
    month: str  # YYYY-MM
    count: int


class ApplicationStats(CamelModel):
    """Aggregate statistics over all applications"""

    total: int
    status_breakdown: dict[str, int]
    generation_breakdown: list[GenerationCount]
    monthly_trend: list[MonthlyCount]
    approval_rate: int  # percent

"""Data types produced by the metrics engine."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ChartDataPoint:
    """Running commit total at the end of one UTC calendar day."""

    date: date
    cumulative_count: int

    @property
    def formatted_date(self) -> str:
        """Tooltip label, e.g. "Jan 5, 2026"."""
        return f"{self.date:%b} {self.date.day}, {self.date.year}"


@dataclass(frozen=True)
class VelocityMetrics:
    """Commit velocity over a window and growth between its two halves."""

    total_commits: int
    weekly_rate: float  # one decimal place
    monthly_rate: float  # one decimal place
    growth_percentage: float | None  # None when neither half has commits
    start_date: datetime
    end_date: datetime

    def format_growth(self) -> str:
        if self.growth_percentage is None:
            return "N/A"
        sign = "+" if self.growth_percentage >= 0 else ""
        return f"{sign}{self.growth_percentage:.1f}%"

    def growth_description(self) -> str:
        if self.growth_percentage is None:
            return "No previous data"
        if self.growth_percentage == 0:
            return "Same as previous period"
        return "vs previous period"

"""
Cumulative commit timeline.

Day boundaries are UTC calendar days. The series is sparse: days without
commits get no point, consumers interpolate between points.
"""

from collections import Counter
from collections.abc import Iterable

from dateutil.relativedelta import relativedelta

from commitline.services.github.helpers import ensure_utc
from commitline.services.github.types import Commit
from commitline.services.metrics.types import ChartDataPoint


def build_cumulative_series(commits: Iterable[Commit]) -> list[ChartDataPoint]:
    """
    Build one point per day that has commits, carrying the running total.

    Input order does not matter. An empty input yields an empty series.
    """
    ordered = sorted(commits, key=lambda c: c.date)
    if not ordered:
        return []

    per_day = Counter(ensure_utc(commit.date).date() for commit in ordered)

    points: list[ChartDataPoint] = []
    cumulative_count = 0
    for day in sorted(per_day):
        cumulative_count += per_day[day]
        points.append(ChartDataPoint(date=day, cumulative_count=cumulative_count))
    return points


def axis_date_format(points: list[ChartDataPoint]) -> str:
    """
    strftime pattern for the chart's x-axis ticks.

    Series spanning more than a year are labelled by month and year,
    shorter ones by month and day.
    """
    if len(points) < 2:
        return "%b %d"

    span = relativedelta(points[-1].date, points[0].date)
    if span.years * 12 + span.months > 12:
        return "%b %Y"
    return "%b %d"

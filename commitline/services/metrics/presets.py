"""Named date windows offered by the dashboard's range picker."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from dateutil.relativedelta import relativedelta

from commitline.services.github.types import DateRange


@dataclass(frozen=True)
class DatePreset:
    """A labelled window ending now."""

    key: str
    label: str
    lookback: Callable[[datetime], datetime | None]


PRESETS: dict[str, DatePreset] = {
    "7days": DatePreset("7days", "Last 7 days", lambda now: now - timedelta(days=7)),
    "30days": DatePreset("30days", "Last 30 days", lambda now: now - timedelta(days=30)),
    "1year": DatePreset("1year", "Last year", lambda now: now - relativedelta(years=1)),
    "all": DatePreset("all", "All time", lambda now: None),
}


def resolve_preset(key: str, now: datetime | None = None) -> DateRange:
    """
    Turn a preset key into a concrete DateRange.

    "all" is unbounded on both sides; the others end at ``now``.

    Raises:
        ValueError: If the key is not a known preset
    """
    preset = PRESETS.get(key)
    if preset is None:
        raise ValueError(f"Unknown date preset {key!r}, expected one of {sorted(PRESETS)}")

    now = now or datetime.now(UTC)
    since = preset.lookback(now)
    if since is None:
        return DateRange()
    return DateRange(since=since, until=now)

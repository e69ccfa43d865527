"""Health impact progress - Pure functions.

Progress ratios for the fixed set of community health metrics shown
next to the collection point browser.
"""

from dataclasses import dataclass
from typing import Any, Iterable


DEFAULT_COMMUNITY_IMPACT = (
    "Your recycling efforts have contributed to a 23% reduction in "
    "waste-related illnesses in your community over the past year."
)


@dataclass(frozen=True)
class HealthMetric:
    """A metric tracked against a target.

    Attributes:
        title: Display title
        value: Current value
        target: Target value
        unit: Unit suffix (e.g., "%")
    """
    title: str
    value: float
    target: float
    unit: str = "%"


DEFAULT_METRICS: tuple[HealthMetric, ...] = (
    HealthMetric(title="Air Quality Improvement", value=68, target=100),
    HealthMetric(title="Reduced Respiratory Issues", value=42, target=100),
    HealthMetric(title="Community Health Score", value=78, target=100),
)


def progress_percent(value: float, target: float) -> float:
    """Compute progress toward a target as a bar percentage.

    Pure function.

    Args:
        value: Current value
        target: Target value

    Returns:
        value / target * 100, clamped to [0, 100]; 0.0 when target <= 0
    """
    if target <= 0:
        return 0.0
    percent = value * 100 / target
    return max(0.0, min(100.0, percent))


def _format_number(number: float) -> str:
    if float(number).is_integer():
        return str(int(number))
    return f"{number:g}"


def format_progress(metric: HealthMetric) -> str:
    """Format a metric as "value/target<unit>" (e.g., "68/100%").

    Pure function.
    """
    return f"{_format_number(metric.value)}/{_format_number(metric.target)}{metric.unit}"


def summarize_metrics(metrics: Iterable[HealthMetric]) -> list[dict[str, Any]]:
    """Summarize metrics for display.

    Pure function.

    Args:
        metrics: Metrics to summarize

    Returns:
        List of dicts with title, value, target, unit, percent, label
    """
    return [
        {
            "title": m.title,
            "value": m.value,
            "target": m.target,
            "unit": m.unit,
            "percent": progress_percent(m.value, m.target),
            "label": format_progress(m),
        }
        for m in metrics
    ]

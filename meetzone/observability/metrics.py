from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry(auto_describe=True)
        self.lines_total = Counter(
            "meetzone_lines_total",
            "Total processed lines by status",
            labelnames=("status",),
            registry=self.registry,
        )
        self.conversion_duration_seconds = Histogram(
            "meetzone_conversion_duration_seconds",
            "Duration of single line conversions in seconds",
            registry=self.registry,
        )

    def mark_line_status(self, status: str) -> None:
        self.lines_total.labels(status=status).inc()

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST

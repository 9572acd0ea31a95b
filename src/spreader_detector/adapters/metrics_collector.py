"""
In-Memory Metrics Collector.

Collects stage timings and counts of a detection run in memory.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector for a single-threaded run."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[Dict[str, Any]]] = defaultdict(list)

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        self._record(name, "count", value, tags)

    def get_entries(self, name: str) -> List[Dict[str, Any]]:
        """Raw entries recorded under ``name``."""
        return list(self._metrics.get(name, []))

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summarize collected metrics.

        Returns:
            name -> {"count", "total", "last"}; tagged entries are keyed
            as ``name[tag=value,...]``
        """
        summary: Dict[str, Any] = {}
        for name, entries in self._metrics.items():
            grouped: Dict[str, List[float]] = defaultdict(list)
            for entry in entries:
                grouped[self._key(name, entry["tags"])].append(entry["value"])
            for key, values in grouped.items():
                summary[key] = {
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
        return summary

    def clear(self) -> None:
        """Clear all metrics."""
        self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        self._metrics[name].append(
            {
                "type": metric_type,
                "value": value,
                "tags": dict(tags or {}),
                "timestamp": datetime.now().isoformat(),
            }
        )

    @staticmethod
    def _key(name: str, tags: Dict[str, str]) -> str:
        if not tags:
            return name
        rendered = ",".join(f"{k}={v}" for k, v in sorted(tags.items()))
        return f"{name}[{rendered}]"

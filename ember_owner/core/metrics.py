"""
Container metrics.

Counts lookups, cache hits and instantiations, and times factory calls.
Only aggregates are kept, so the collector stays the same size however
many lookups a long-running owner serves.
"""

import time
from typing import Dict, Optional, Any, Tuple
from collections import defaultdict

TagKey = Tuple[Tuple[str, str], ...]


def _tag_key(tags: Optional[Dict[str, str]]) -> TagKey:
    return tuple(sorted((tags or {}).items()))


class MetricsCollector:
    """
    Collects counters, timing aggregates and errors.
    """

    def __init__(self):
        self.counters: Dict[str, int] = defaultdict(int)
        self.tagged_counters: Dict[Tuple[str, TagKey], int] = defaultdict(int)
        self.timing_totals: Dict[str, float] = defaultdict(float)
        self.timing_counts: Dict[str, int] = defaultdict(int)
        self.errors: Dict[str, int] = defaultdict(int)

    def increment(self, name: str, value: int = 1, tags: Optional[Dict[str, str]] = None):
        """
        Increment a counter metric.

        Args:
            name: Metric name
            value: Increment value
            tags: Optional tags, e.g. {"type": "service"}; also counted per tag set
        """
        self.counters[name] += value
        if tags:
            self.tagged_counters[(name, _tag_key(tags))] += value

    def record_timing(self, name: str, duration: float):
        """Add a duration in seconds to the running total for name."""
        self.timing_totals[name] += duration
        self.timing_counts[name] += 1

    def record_error(self, name: str, error_type: str = "unknown"):
        """
        Record an error for an operation.

        Args:
            name: Operation name
            error_type: Exception class name or other short label
        """
        self.errors[f"{name}:{error_type}"] += 1
        self.increment(f"{name}_errors")

    def get_counter(self, name: str, tags: Optional[Dict[str, str]] = None) -> int:
        if tags:
            return self.tagged_counters.get((name, _tag_key(tags)), 0)
        return self.counters.get(name, 0)

    def get_timing_count(self, name: str) -> int:
        return self.timing_counts.get(name, 0)

    def get_avg_timing(self, name: str) -> Optional[float]:
        count = self.timing_counts.get(name, 0)
        if not count:
            return None
        return self.timing_totals[name] / count

    def get_error_count(self, name: str) -> int:
        return sum(count for key, count in self.errors.items() if key.startswith(f"{name}:"))

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of all metrics."""
        return {
            'counters': dict(self.counters),
            'avg_timings': {
                name: self.get_avg_timing(name)
                for name in self.timing_counts
            },
            'errors': dict(self.errors),
        }

    def size(self) -> int:
        """Number of stored entries across all aggregates."""
        return (
            len(self.counters) + len(self.tagged_counters) + len(self.timing_totals)
            + len(self.timing_counts) + len(self.errors)
        )


class Timer:
    """
    Context manager timing a block into a collector.

    Usage:
        with Timer("instantiate", collector):
            instance = manager.create()
    """

    def __init__(self, name: str, collector: Optional[MetricsCollector] = None):
        self.name = name
        self.collector = collector
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is not None and self.collector is not None:
            self.collector.record_timing(self.name, self.elapsed())
        return False

    def elapsed(self) -> float:
        if self.start_time is not None:
            return time.perf_counter() - self.start_time
        return 0.0


# Global metrics collector
_metrics_collector: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get the global metrics collector."""
    global _metrics_collector
    if _metrics_collector is None:
        _metrics_collector = MetricsCollector()
    return _metrics_collector


def set_metrics(collector: Optional[MetricsCollector]):
    """Set the global metrics collector (useful for testing)."""
    global _metrics_collector
    _metrics_collector = collector

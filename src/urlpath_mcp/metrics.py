"""Per-operation metrics collection and tracking.

Collects call counts, latencies and error counts for each codec operation
served by the MCP tools.
"""

import asyncio
import time
from collections import deque
from dataclasses import dataclass, field

OPERATIONS = ("decode", "encode", "normalize")

# Latencies kept per operation for the recent-average figure
RECENT_SAMPLES = 100


@dataclass
class OperationMetrics:
    """Metrics for a single operation.

    Keeps running totals plus a bounded window of recent latencies, so memory
    use does not grow with the number of calls. All latency times are in
    milliseconds.
    """

    operation: str
    count: int = 0
    total_ms: float = 0.0
    max_latency_ms: float = 0.0
    recent_times: deque[float] = field(default_factory=lambda: deque(maxlen=RECENT_SAMPLES))
    errors: int = 0

    def add_sample(self, duration_ms: float, success: bool) -> None:
        """Account for one call of this operation."""
        self.count += 1
        self.total_ms += duration_ms
        self.max_latency_ms = max(self.max_latency_ms, duration_ms)
        self.recent_times.append(duration_ms)
        if not success:
            self.errors += 1

    def avg_ms(self) -> float:
        """Calculate average latency in milliseconds over all calls."""
        return self.total_ms / self.count if self.count else 0.0

    def max_ms(self) -> float:
        return self.max_latency_ms

    def recent_avg_ms(self) -> float:
        """Calculate average latency over the last RECENT_SAMPLES calls."""
        if not self.recent_times:
            return 0.0
        return sum(self.recent_times) / len(self.recent_times)

    def to_dict(self) -> dict:
        """Convert metrics to dictionary format.

        Returns:
            Dictionary representation of metrics suitable for JSON serialization
        """
        return {
            "operation": self.operation,
            "count": self.count,
            "avg_ms": round(self.avg_ms(), 3),
            "recent_avg_ms": round(self.recent_avg_ms(), 3),
            "max_ms": round(self.max_ms(), 3),
            "errors": self.errors,
        }


class MetricsCollector:
    """Metrics collector for all codec operations.

    Uses asyncio.Lock for safe access from concurrent tool calls.
    """

    def __init__(self) -> None:
        """Initialize metrics collector."""
        self._metrics: dict[str, OperationMetrics] = {}
        self._start_time = time.time()
        self._lock = asyncio.Lock()

    async def record(self, operation: str, duration_ms: float, success: bool) -> None:
        """Record metrics for an operation.

        Args:
            operation: Operation name (decode, encode, normalize)
            duration_ms: Duration in milliseconds
            success: Whether the operation succeeded

        Raises:
            ValueError: If operation is not a valid operation name
        """
        if operation not in OPERATIONS:
            raise ValueError(f"Invalid operation: {operation}")

        async with self._lock:
            if operation not in self._metrics:
                self._metrics[operation] = OperationMetrics(operation)

            self._metrics[operation].add_sample(duration_ms, success)

    def get_operation_metrics(self, operation: str) -> OperationMetrics | None:
        """Get metrics for a specific operation, or None if it was never recorded."""
        return self._metrics.get(operation)

    def get_all_metrics(self) -> list[OperationMetrics]:
        """Get metrics for all operations with recorded activity, in OPERATIONS order."""
        return [self._metrics[op] for op in OPERATIONS if op in self._metrics]

    def uptime_seconds(self) -> float:
        """Get time elapsed since collector initialization, in seconds."""
        return time.time() - self._start_time


_collector: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Get the process-wide metrics collector, creating it on first call."""
    global _collector
    if _collector is None:
        _collector = MetricsCollector()
    return _collector


def reset_metrics_collector() -> None:
    """Reset the process-wide metrics collector (for testing only)."""
    global _collector
    _collector = None

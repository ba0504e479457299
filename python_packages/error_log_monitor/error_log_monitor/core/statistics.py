# error_log_monitor/error_log_monitor/core/statistics.py
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, Sequence

import numpy as np

from error_log_monitor.config.settings import (
    EMPTY_STATISTICS,
    SEVERITY_DECIMALS,
    STATISTICS_TEMPLATE,
)
from .log import LogEntry

SEVERITY_QUANTUM = Decimal(1).scaleb(-SEVERITY_DECIMALS)
# Enough digits for the largest double in plain notation
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_severity(value: float) -> str:
    """Render a severity with at most six decimals and no trailing zeros"""
    if math.isnan(value):
        return "NaN"
    if value == 0.0:
        return "0"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    rounded = Decimal(repr(value)).quantize(SEVERITY_QUANTUM, context=_DECIMAL_CONTEXT)
    text = f"{rounded:f}"
    return text.rstrip("0").rstrip(".")


@dataclass(frozen=True)
class SeverityStatistics:
    """Min, max and mean over a non-empty set of severities"""
    count: int
    minimum: float
    maximum: float
    mean: float

    @classmethod
    def from_severities(cls, severities: Iterable[float]) -> 'SeverityStatistics':
        values = np.fromiter(severities, dtype=np.float64)
        if values.size == 0:
            raise ValueError("Cannot compute statistics of an empty selection")

        # inf - inf and overflowing sums yield NaN / inf without warnings
        with np.errstate(invalid="ignore", over="ignore"):
            return cls(
                count=int(values.size),
                minimum=float(np.min(values)),
                maximum=float(np.max(values)),
                mean=float(np.mean(values)),
            )

    def format(self) -> str:
        return STATISTICS_TEMPLATE.format(
            format_severity(self.minimum),
            format_severity(self.maximum),
            format_severity(self.mean),
        )


def compute_statistics(entries: Sequence[LogEntry]) -> str:
    """Format min/max/mean severity of the given entries

    An empty selection returns the fixed zero summary.
    """
    if not entries:
        return EMPTY_STATISTICS
    stats = SeverityStatistics.from_severities(entry.severity for entry in entries)
    return stats.format()

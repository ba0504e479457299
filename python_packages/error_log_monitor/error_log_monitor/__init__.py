# error_log_monitor/error_log_monitor/__init__.py
from .core import CommandProcessor, SeverityIndex, compute_statistics, format_severity

__all__ = [
    'CommandProcessor',
    'SeverityIndex',
    'compute_statistics',
    'format_severity'
]

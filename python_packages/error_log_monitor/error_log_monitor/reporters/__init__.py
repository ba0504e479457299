# error_log_monitor/error_log_monitor/reporters/__init__.py
from .batch import BatchReporter

__all__ = [
    'BatchReporter'
]

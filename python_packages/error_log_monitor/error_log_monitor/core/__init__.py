# error_log_monitor/error_log_monitor/core/__init__.py
from .log import InvalidLogTypeError, LogEntry, validate_log_type
from .statistics import SeverityStatistics, compute_statistics, format_severity
from .index import SeverityIndex
from .commands import (
    Command,
    CommandParser,
    Direction,
    InsertCommand,
    MalformedCommandError,
    TimeQuery,
    TypeQuery,
    TypeTimeQuery,
)
from .models import BatchResult, LineError
from .processor import CommandProcessor
from .reporter import Reporter

__all__ = [
    'InvalidLogTypeError',
    'LogEntry',
    'validate_log_type',
    'SeverityStatistics',
    'compute_statistics',
    'format_severity',
    'SeverityIndex',
    'Command',
    'CommandParser',
    'Direction',
    'InsertCommand',
    'MalformedCommandError',
    'TimeQuery',
    'TypeQuery',
    'TypeTimeQuery',
    'BatchResult',
    'LineError',
    'CommandProcessor',
    'Reporter'
]

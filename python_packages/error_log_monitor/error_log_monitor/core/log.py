# error_log_monitor/error_log_monitor/core/log.py
from dataclasses import dataclass

from error_log_monitor.config.settings import MAX_LOG_TYPE_LENGTH


class InvalidLogTypeError(ValueError):
    """Raised when a log type is longer than the allowed length"""

    def __init__(self, log_type: str):
        self.log_type = log_type
        super().__init__(
            f"Log type length cannot exceed {MAX_LOG_TYPE_LENGTH} characters"
        )


def validate_log_type(log_type: str) -> str:
    """Return the log type unchanged, or raise if it is too long"""
    if len(log_type) > MAX_LOG_TYPE_LENGTH:
        raise InvalidLogTypeError(log_type)
    return log_type


@dataclass(frozen=True)
class LogEntry:
    """Single timestamped log event"""
    timestamp: int
    log_type: str
    severity: float

    @classmethod
    def create(cls, timestamp: int, log_type: str, severity: float) -> 'LogEntry':
        """Build a validated log entry

        Raises:
            InvalidLogTypeError: If log_type exceeds the maximum length
        """
        return cls(
            timestamp=int(timestamp),
            log_type=validate_log_type(log_type),
            severity=float(severity)
        )

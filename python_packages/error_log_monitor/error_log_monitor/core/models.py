# error_log_monitor/error_log_monitor/core/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class LineError:
    """A command line that was rejected without stopping the batch"""
    line_number: int
    line: str
    message: str


@dataclass
class BatchResult:
    """Outcome of processing one command file"""
    input_path: Path
    output_path: Path
    lines_read: int = 0
    lines_written: int = 0
    errors: List[LineError] = field(default_factory=list)
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

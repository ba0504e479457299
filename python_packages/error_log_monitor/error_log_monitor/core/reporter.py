from abc import ABC, abstractmethod
from typing import Any, Optional

from rich.console import Console
from rich.theme import Theme

from error_log_monitor.config.settings import REPORT_COLORS


class Reporter(ABC):
    """Base class for reports printed to stderr"""
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=Theme(REPORT_COLORS), stderr=True)

    @abstractmethod
    def generate_report(self, result: Any) -> None:
        """Generate and display the report"""
        pass

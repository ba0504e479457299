import pytest

from error_log_monitor.core import SeverityIndex


@pytest.fixture
def index() -> SeverityIndex:
    """Index holding two CPU entries and one MEM entry."""
    index = SeverityIndex()
    index.insert(100, "CPU", 5.0)
    index.insert(200, "CPU", 10.0)
    index.insert(150, "MEM", 1.0)
    return index

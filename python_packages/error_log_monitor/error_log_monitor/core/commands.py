# error_log_monitor/error_log_monitor/core/commands.py
import math
import re
from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from error_log_monitor.config.settings import (
    BEFORE_KEYWORD,
    INSERT,
    QUERY_BY_TIMESTAMP,
    QUERY_BY_TYPE,
    QUERY_BY_TYPE_AND_TIMESTAMP,
)

COMMAND_CODE_PATTERN = re.compile(r'^[+-]?[0-9]+')
TIMESTAMP_PATTERN = re.compile(r'[+-]?[0-9]+')
# Double literals: NaN, Infinity, decimal or hex with binary exponent,
# optionally followed by an f/d type suffix
SEVERITY_PATTERN = re.compile(
    r'(?P<sign>[+-]?)(?:'
    r'(?P<special>NaN|Infinity)'
    r'|(?P<hex>0[xX](?:[0-9a-fA-F]+\.?|[0-9a-fA-F]*\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)[fFdD]?'
    r'|(?P<decimal>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?'
    r')'
)


def parse_integer(text: str) -> int:
    """Convert a validated decimal integer string of any length"""
    return int(Decimal(text))


class MalformedCommandError(ValueError):
    """Raised when a command line cannot be parsed"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class Direction(Enum):
    BEFORE = "BEFORE"
    AFTER = "AFTER"


@dataclass(frozen=True)
class InsertCommand:
    timestamp: int
    log_type: str
    severity: float


@dataclass(frozen=True)
class TypeQuery:
    log_type: str


@dataclass(frozen=True)
class TimeQuery:
    direction: Direction
    timestamp: int


@dataclass(frozen=True)
class TypeTimeQuery:
    direction: Direction
    log_type: str
    timestamp: int


Command = Union[InsertCommand, TypeQuery, TimeQuery, TypeTimeQuery]


class CommandParser:
    """Turn whitespace separated command lines into command objects

    Grammar, one command per line:
        1 <timestamp> <type> <severity>
        2 <type>
        3 <BEFORE|AFTER> <timestamp>
        4[BEFORE] <unused> <type> <timestamp>

    For command 4 the direction is read from the first token: it queries
    before the timestamp when that token contains BEFORE, after otherwise.
    """

    @classmethod
    def parse(cls, line: str, line_number: Optional[int] = None) -> Optional[Command]:
        """Parse one line

        Returns:
            The command, or None for lines that carry no command

        Raises:
            MalformedCommandError: If a recognized command has missing or
                non-numeric arguments
        """
        tokens = line.split()
        if len(tokens) < 2:
            return None

        match = COMMAND_CODE_PATTERN.match(tokens[0])
        if match is None:
            raise MalformedCommandError(f"invalid command code '{tokens[0]}'", line_number)
        code = parse_integer(match.group())

        if code == INSERT:
            cls._require(tokens, 4, line_number)
            return InsertCommand(
                timestamp=cls._parse_timestamp(tokens[1], line_number),
                log_type=tokens[2],
                severity=cls._parse_severity(tokens[3], line_number)
            )

        if code == QUERY_BY_TYPE:
            return TypeQuery(log_type=tokens[1])

        if code == QUERY_BY_TIMESTAMP:
            cls._require(tokens, 3, line_number)
            direction = Direction.BEFORE if tokens[1] == BEFORE_KEYWORD else Direction.AFTER
            return TimeQuery(
                direction=direction,
                timestamp=cls._parse_timestamp(tokens[2], line_number)
            )

        if code == QUERY_BY_TYPE_AND_TIMESTAMP:
            cls._require(tokens, 4, line_number)
            direction = Direction.BEFORE if BEFORE_KEYWORD in tokens[0] else Direction.AFTER
            return TypeTimeQuery(
                direction=direction,
                log_type=tokens[2],
                timestamp=cls._parse_timestamp(tokens[3], line_number)
            )

        return None

    @staticmethod
    def _require(tokens: List[str], count: int, line_number: Optional[int]) -> None:
        if len(tokens) < count:
            raise MalformedCommandError(
                f"command '{tokens[0]}' expects {count} tokens, got {len(tokens)}",
                line_number
            )

    @staticmethod
    def _parse_timestamp(token: str, line_number: Optional[int]) -> int:
        if not TIMESTAMP_PATTERN.fullmatch(token):
            raise MalformedCommandError(f"invalid timestamp '{token}'", line_number)
        return parse_integer(token)

    @staticmethod
    def _parse_severity(token: str, line_number: Optional[int]) -> float:
        match = SEVERITY_PATTERN.fullmatch(token)
        if match is None:
            raise MalformedCommandError(f"invalid severity '{token}'", line_number)

        if match.group('hex'):
            try:
                return float.fromhex(match.group('sign') + match.group('hex'))
            except OverflowError:
                return -math.inf if match.group('sign') == '-' else math.inf
        return float(match.group('sign') + (match.group('special') or match.group('decimal')))

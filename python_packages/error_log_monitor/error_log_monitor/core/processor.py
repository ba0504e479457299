# error_log_monitor/error_log_monitor/core/processor.py
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from error_log_monitor.config.settings import NO_OUTPUT
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
from .index import SeverityIndex
from .log import InvalidLogTypeError, validate_log_type
from .models import BatchResult, LineError

PathLike = Union[str, Path]


class CommandProcessor:
    """Run command files against a severity index

    Rejected log types are recorded in `errors` and produce no output line.
    With strict=True the first rejection stops the batch instead.
    Malformed lines always stop the batch.
    """

    def __init__(self, index: SeverityIndex, strict: bool = False):
        self.index = index
        self.strict = strict
        self.errors: List[LineError] = []
        self.lines_read = 0

    def execute(self, command: Command) -> Optional[str]:
        """Apply one command to the index and return its output line"""
        if isinstance(command, InsertCommand):
            self.index.insert(command.timestamp, command.log_type, command.severity)
            return NO_OUTPUT

        if isinstance(command, TypeQuery):
            return self.index.query_by_type(command.log_type)

        if isinstance(command, TimeQuery):
            if command.direction is Direction.BEFORE:
                return self.index.query_before_timestamp(command.timestamp)
            return self.index.query_after_timestamp(command.timestamp)

        if isinstance(command, TypeTimeQuery):
            log_type = validate_log_type(command.log_type)
            if command.direction is Direction.BEFORE:
                return self.index.query_by_type_before_timestamp(log_type, command.timestamp)
            return self.index.query_by_type_after_timestamp(log_type, command.timestamp)

        raise TypeError(f"Unsupported command: {command!r}")

    def process_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Parse and execute lines in order, yielding one output per command

        Raises:
            MalformedCommandError: If a line cannot be parsed
            InvalidLogTypeError: If a log type is rejected in strict mode
        """
        for line_number, line in enumerate(lines, start=1):
            self.lines_read = line_number
            command = CommandParser.parse(line, line_number)
            if command is None:
                continue

            try:
                output = self.execute(command)
            except InvalidLogTypeError as error:
                if self.strict:
                    raise
                self.errors.append(LineError(line_number, line.rstrip("\r\n"), str(error)))
                continue

            yield output

    def process_file(self, input_path: PathLike, output_path: PathLike) -> BatchResult:
        """Process a command file and write one output line per command

        Output written before a failure is kept in the output file.
        """
        result = BatchResult(input_path=Path(input_path), output_path=Path(output_path))
        self.errors = []
        self.lines_read = 0

        try:
            with open(input_path, 'r') as reader, open(output_path, 'w') as writer:
                for output in self.process_lines(reader):
                    writer.write(output + "\n")
                    result.lines_written += 1
        except MalformedCommandError as error:
            result.failure = str(error)
        except InvalidLogTypeError as error:
            result.failure = f"line {self.lines_read}: {error}"
        except (OSError, UnicodeDecodeError) as error:
            result.failure = str(error)

        result.lines_read = self.lines_read
        result.errors = list(self.errors)
        return result

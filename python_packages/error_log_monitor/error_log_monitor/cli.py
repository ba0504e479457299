# error_log_monitor/error_log_monitor/cli.py
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.prompt import Prompt

from .config.settings import COMPLETION_MESSAGE, INPUT_PROMPT, OUTPUT_PROMPT
from .core import BatchResult, CommandProcessor, SeverityIndex
from .core.processor import PathLike
from .reporters import BatchReporter


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Answer severity statistics queries from a log command file"
    )
    parser.add_argument(
        "input_file", nargs="?", help="Path to the command file"
    )
    parser.add_argument(
        "output_file", nargs="?", help="Path to the output file"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first log type longer than the allowed length",
    )
    parser.add_argument(
        "--summary", action="store_true", help="Print a summary of the run"
    )
    return parser.parse_args(argv)


def run_batch(input_file: PathLike, output_file: PathLike, strict: bool = False) -> BatchResult:
    """Process one command file with a fresh index"""
    processor = CommandProcessor(SeverityIndex(), strict=strict)
    return processor.process_file(input_file, output_file)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    reporter = BatchReporter()

    try:
        input_file = args.input_file or Prompt.ask(INPUT_PROMPT)
        output_file = args.output_file or Prompt.ask(OUTPUT_PROMPT)
    except EOFError:
        reporter.report_failure("no file name given on standard input")
        return 1

    result = run_batch(Path(input_file), Path(output_file), args.strict)

    if args.summary:
        reporter.generate_report(result)
    reporter.report_errors(result)

    if not result.ok:
        return 1

    print(COMPLETION_MESSAGE.format(output_file))
    return 0


if __name__ == "__main__":
    sys.exit(main())

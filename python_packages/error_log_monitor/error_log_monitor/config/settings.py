"""Settings for the error log monitor"""

MAX_LOG_TYPE_LENGTH = 100
SEVERITY_DECIMALS = 6

# Command codes
INSERT = 1
QUERY_BY_TYPE = 2
QUERY_BY_TIMESTAMP = 3
QUERY_BY_TYPE_AND_TIMESTAMP = 4

BEFORE_KEYWORD = "BEFORE"

NO_OUTPUT = "No output"
STATISTICS_TEMPLATE = "Min Severity: {}, Max Severity: {}, Mean Severity: {}"
# Kept as a literal, it does not go through severity formatting
EMPTY_STATISTICS = "Min Severity: 0.0, Max Severity: 0.0, Mean Severity: 0.0"

INPUT_PROMPT = "Enter the name of the input file"
OUTPUT_PROMPT = "Enter the name of the output file"
COMPLETION_MESSAGE = "All the output is written to the file: {}"

REPORT_COLORS = {
    "title": "magenta",
    "path": "cyan",
    "count": "white",
    "line_number": "bright_black",
    "rejected": "yellow",
    "failure": "red",
    "success": "green",
}

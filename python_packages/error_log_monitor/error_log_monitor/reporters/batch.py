# error_log_monitor/error_log_monitor/reporters/batch.py
from rich.box import ROUNDED
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from error_log_monitor.core import BatchResult, Reporter


class BatchReporter(Reporter):
    def generate_report(self, result: BatchResult) -> None:
        """Print a summary panel of a batch run"""
        table = Table(show_header=False, box=None, collapse_padding=True)
        table.add_column("Label", style="bold")
        table.add_column("Value", justify="left")

        table.add_row("Input", f"[path]{escape(str(result.input_path))}[/path]")
        table.add_row("Output", f"[path]{escape(str(result.output_path))}[/path]")
        table.add_row("Lines read", f"[count]{result.lines_read}[/count]")
        table.add_row("Lines written", f"[count]{result.lines_written}[/count]")
        table.add_row("Rejected", f"[rejected]{len(result.errors)}[/rejected]")
        if result.ok:
            table.add_row("Status", "[success]completed[/success]")
        else:
            table.add_row("Status", "[failure]failed[/failure]")

        self.console.print(
            Panel(
                table,
                title="[title]Error Log Monitor[/title]",
                box=ROUNDED,
                padding=(0, 1),
                expand=False
            )
        )

    def report_errors(self, result: BatchResult) -> None:
        """Print one line per rejected command and the failure, if any"""
        for error in result.errors:
            self.console.print(f"  line {error.line_number} | ", style="line_number", end="")
            self.console.print(error.message, style="rejected", markup=False, highlight=False)

        if not result.ok:
            self.report_failure(result.failure)

    def report_failure(self, message: str) -> None:
        self.console.print(f"Error: {message}", style="failure", markup=False, highlight=False)

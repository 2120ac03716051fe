"""Step, action and assertion logging for browser journeys."""

from datetime import datetime, timezone

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import VerificationReport

console = Console()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def log_step(step_name: str, status: str = "SUCCESS") -> None:
    """Log completion of a test step."""
    console.print(f"[dim]\\[{_timestamp()}][/] [green]✓ STEP:[/] {escape(step_name)} - {escape(status)}")


def log_action(action_name: str, details: str = "") -> None:
    """Log a browser action about to happen."""
    suffix = f" [dim]| {escape(details)}[/]" if details else ""
    console.print(f"[dim]\\[{_timestamp()}][/] [cyan]▶ ACTION:[/] {escape(action_name)}{suffix}")


def log_assertion(assertion_name: str, passed: bool = True, details: str = "") -> None:
    """Log the outcome of an assertion."""
    status = "[green]✓ PASS[/]" if passed else "[red]✗ FAIL[/]"
    suffix = f" [dim]| {escape(details)}[/]" if details else ""
    console.print(f"[dim]\\[{_timestamp()}][/] {status}: {escape(assertion_name)}{suffix}")


def log_warning(message: str) -> None:
    console.print(f"[yellow]⚠ {escape(message)}[/]")


def render_verification_report(report: VerificationReport, title: str = "Price Verification") -> Table:
    """Build a rich table of per-item and order-level checks."""
    table = Table(title=title)
    table.add_column("Check", style="cyan")
    table.add_column("Expected", justify="right")
    table.add_column("Shown", justify="right")
    table.add_column("Result")

    def verdict(ok: bool) -> str:
        return "[green]✓[/]" if ok else "[red]✗[/]"

    for item in report.items:
        table.add_row(
            f"{escape(item.name)} ({item.quantity} × {item.unit_price:.2f})",
            f"{item.expected_subtotal:.2f}",
            f"{item.actual_subtotal:.2f}",
            verdict(item.is_correct),
        )

    table.add_section()
    table.add_row("Sub-Total", f"{report.calculated_subtotal:.2f}", f"{report.order_subtotal:.2f}", verdict(report.subtotal_match))
    table.add_row("Shipping", "", f"{report.shipping:.2f}", "")
    table.add_row("Tax", "", f"{report.tax:.2f}", "")
    table.add_row("Discount", "", f"{report.discount:.2f}", "")
    table.add_row("Total", f"{report.expected_total:.2f}", f"{report.order_total:.2f}", verdict(report.total_match))
    return table


def print_verification_report(report: VerificationReport, title: str = "Price Verification") -> None:
    console.print(render_verification_report(report, title))
    if report.all_calculations_correct:
        console.print("[bold green]✓ All calculations correct[/]")
    else:
        for problem in report.mismatches():
            console.print(f"[red]✗ {escape(problem)}[/]")

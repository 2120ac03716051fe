"""CLI entry point for the storefront suite."""

import json
from dataclasses import asdict
from pathlib import Path

import click
from rich.markup import escape

from .config import load_config
from .scraping.snapshot import verify_cart_snapshot
from .steplog import console, print_verification_report


@click.group()
@click.version_option(package_name="storefront-e2e")
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file path",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None) -> None:
    """Storefront E2E - cart and checkout verification for the demo web shop."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)


@main.command("verify-snapshot")
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "-f", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.option("--tolerance", type=float, default=None, help="Allowed difference per check (default from config)")
@click.pass_context
def verify_snapshot(ctx: click.Context, snapshot: Path, output_format: str, tolerance: float | None) -> None:
    """Verify the prices in a saved cart page (e.g. a failure snapshot)."""
    config = ctx.obj["config"]
    if tolerance is None:
        tolerance = config.verification.tolerance

    result = verify_cart_snapshot(snapshot, tolerance)
    report = result.report

    if output_format == "json":
        payload = {
            "snapshot": str(snapshot),
            "tolerance": tolerance,
            "report": report.to_dict(),
            "skipped_rows": [asdict(row) for row in result.scrape.skipped],
            "missing_aggregates": [field.value for field in result.readout.missing],
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        console.print(f"\n[bold blue]🔍 Verifying cart snapshot:[/] {escape(str(snapshot))}\n")

        if not report.items:
            console.print("[yellow]No cart rows found in snapshot[/]")
        for row in result.scrape.skipped:
            console.print(f"[yellow]Skipped row {row.index}: missing {', '.join(row.missing)}[/]")
        if result.readout.missing:
            names = ", ".join(field.value for field in result.readout.missing)
            console.print(f"[dim]Not shown (read as 0): {names}[/]")

        print_verification_report(report)
        console.print()

    ctx.exit(0 if report.all_calculations_correct else 1)


@main.command("show-config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Print the effective configuration as JSON."""
    data = ctx.obj["config"].model_dump(mode="json")
    if data.get("test_user_password"):
        data["test_user_password"] = "[SET]"
    click.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    main()

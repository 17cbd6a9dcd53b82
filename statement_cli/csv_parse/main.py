"""csv-parse CLI entrypoint."""

from __future__ import annotations

import csv
import json
from io import StringIO
from pathlib import Path

import click
from rich.table import Table

from statement_cli.shared.cli import CLIContext, common_cli_options, handle_cli_errors, pass_cli_context
from statement_cli.shared.config import OUTPUT_FORMATS
from statement_cli.shared.exceptions import UnsupportedFormatError

from .detection import detect_format
from .extractors import REGISTRY
from .loader import load_statement_text
from .parse import parse_statement
from .stats import format_skipped_stats
from .types import BankFormat, ParseResult

CSV_HEADER = ["date", "merchant", "amount", "forced_category", "description"]


@click.group(help="Parse bank CSV statement exports into purchase transactions.")
@common_cli_options
def main(cli_ctx: CLIContext) -> None:
    return


@main.command("parse")
@click.argument("statement_file", type=click.Path(path_type=str))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    help="Output format (default: from config or 'table').",
)
@click.option("--output", "output_path", type=click.Path(path_type=str), help="Write JSON/CSV output to file.")
@click.option("--encoding", type=str, help="Decode the file with this encoding only.")
@click.option("--strict", is_flag=True, help="Fail when the bank format is not recognised.")
@handle_cli_errors
@pass_cli_context
def parse_command(
    cli_ctx: CLIContext,
    statement_file: str,
    output_format: str | None,
    output_path: str | None,
    encoding: str | None,
    strict: bool,
) -> None:
    """Parse STATEMENT_FILE and print the accepted transactions."""

    settings = cli_ctx.config
    text, used_encoding = load_statement_text(
        statement_file,
        encodings=cli_ctx.encodings(encoding),
        max_file_size=cli_ctx.max_file_size,
    )
    cli_ctx.logger.debug(f"Decoded {statement_file} as {used_encoding}")

    result = parse_statement(text)
    if strict and result.bank is BankFormat.UNKNOWN:
        supported = ", ".join(bank.display_name for bank in REGISTRY.names())
        raise UnsupportedFormatError(
            f"Unsupported statement format. Supported banks: {supported}"
        )

    cli_ctx.logger.info(
        f"Bank: {result.bank.display_name} | Transactions: {len(result.transactions)} | "
        f"Skipped: {result.skipped.count}"
    )
    if settings.output.show_skipped:
        cli_ctx.logger.skipped(format_skipped_stats(result.skipped))

    if not result.transactions:
        raise click.ClickException(
            f"No transactions found in {statement_file} (format: {result.bank.value})."
        )

    fmt = (output_format or settings.output.format).lower()
    if fmt == "table":
        if output_path:
            raise click.UsageError("--output requires --format json or --format csv.")
        cli_ctx.logger.console.print(_render_table(result))
        return

    payload = _render_json(result) if fmt == "json" else _render_csv(result)
    if output_path:
        destination = Path(output_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(payload, encoding="utf-8")
        cli_ctx.logger.success(f"Output written to {destination}.")
    else:
        click.echo(payload, nl=False)


@main.command("detect")
@click.argument("statement_file", type=click.Path(path_type=str))
@click.option("--encoding", type=str, help="Decode the file with this encoding only.")
@handle_cli_errors
@pass_cli_context
def detect_command(cli_ctx: CLIContext, statement_file: str, encoding: str | None) -> None:
    """Print the bank format detected for STATEMENT_FILE."""

    text, _ = load_statement_text(
        statement_file,
        encodings=cli_ctx.encodings(encoding),
        max_file_size=cli_ctx.max_file_size,
    )
    bank = detect_format(text)
    cli_ctx.logger.info(f"Detected format: {bank.display_name}")
    click.echo(bank.value)


def _render_table(result: ParseResult) -> Table:
    table = Table(
        title=f"{result.bank.display_name} ({len(result.transactions)})",
        caption=f"Total: {result.total_amount:.2f}",
    )
    table.add_column("Date")
    table.add_column("Merchant")
    table.add_column("Amount", justify="right")
    table.add_column("Category")
    for txn in result.transactions:
        table.add_row(
            txn.date,
            txn.merchant,
            f"{txn.amount:.2f}",
            txn.forced_category.value if txn.forced_category else "",
        )
    return table


def _render_json(result: ParseResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n"


def _render_csv(result: ParseResult) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADER)
    for txn in result.transactions:
        row = txn.to_dict()
        writer.writerow([row[column] or "" for column in CSV_HEADER])
    return buffer.getvalue()

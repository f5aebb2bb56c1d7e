"""CLI entry point for aumai-cfguard."""

from __future__ import annotations

import asyncio
import datetime
import json
import re
import sys
from pathlib import Path
from typing import Any

import click
import pydantic

from aumai_cfguard.catalog import default_registry
from aumai_cfguard.config import GatewayConfig
from aumai_cfguard.errors import InvalidVariables, MissingCredentialError
from aumai_cfguard.log import configure_logging
from aumai_cfguard.models import AuditRecord, Outcome
from aumai_cfguard.query_guard import check_query, validate_variables
from aumai_cfguard.server import run_server

# Unit suffix -> (name, seconds). A bare number means seconds.
_DURATION_UNITS: dict[str, tuple[str, int]] = {
    "s": ("seconds", 1),
    "m": ("minutes", 60),
    "h": ("hours", 3600),
    "d": ("days", 86400),
}
_DURATION_HELP = "/".join(name for name, _ in _DURATION_UNITS.values())
_DURATION_PATTERN = re.compile(
    rf"^(\d+(?:\.\d+)?)\s*([{''.join(_DURATION_UNITS)}]?)$", re.IGNORECASE
)


@click.group()
@click.version_option(package_name="aumai-cfguard")
def main() -> None:
    """AumAI CFGuard: read-only, rate-limited, audited Cloudflare API tools.

    Use 'aumai-cfguard --help' to see available sub-commands.
    """


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


@main.command("serve")
def serve_command() -> None:
    """Run the MCP tool server on stdio.

    Settings come from the environment; CLOUDFLARE_API_TOKEN is required.
    """
    try:
        config = GatewayConfig.from_env()
    except MissingCredentialError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except pydantic.ValidationError as exc:
        click.echo(click.style(f"invalid configuration: {exc}", fg="red"), err=True)
        sys.exit(1)

    configure_logging(config.log_level, json_output=config.log_format == "json")
    asyncio.run(run_server(config))


# ---------------------------------------------------------------------------
# operations
# ---------------------------------------------------------------------------


@main.command("operations")
@click.option("--search", "search_term", default=None, help="Only show operations matching TEXT.")
@click.option(
    "--output",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
)
def operations_command(search_term: str | None, output_format: str) -> None:
    """List the operations exposed as tools."""
    registry = default_registry()
    specs = registry.search(search_term) if search_term else registry.all_specs()

    if output_format == "json":
        click.echo(
            json.dumps(
                [
                    {
                        "name": spec.name,
                        "method": spec.method,
                        "path": spec.path,
                        "kind": spec.kind,
                        "description": spec.description,
                    }
                    for spec in specs
                ],
                indent=2,
            )
        )
        return

    if not specs:
        click.echo(f"No operations match '{search_term}'")
        return

    width = max(len(spec.name) for spec in specs)
    for spec in specs:
        click.echo(f"  {spec.name:<{width}}  {spec.method:<4} {spec.path}")
    click.echo(f"\n{len(specs)} operation(s).")


# ---------------------------------------------------------------------------
# check-query
# ---------------------------------------------------------------------------


@main.command("check-query")
@click.option("--query", "query_text", default=None, help="GraphQL query text.")
@click.option(
    "--file",
    "query_file",
    default=None,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
    help="Read the GraphQL query from a file.",
)
@click.option("--variables", "variables_text", default=None, help="JSON object of variables.")
def check_query_command(
    query_text: str | None, query_file: str | None, variables_text: str | None
) -> None:
    """Check a GraphQL query against the read-only filter without sending it.

    Exits with status 1 when the query or its variables are rejected.
    """
    if (query_text is None) == (query_file is None):
        raise click.UsageError("Provide exactly one of --query or --file.")
    if query_file is not None:
        query_text = Path(query_file).read_text(encoding="utf-8")

    decision = check_query(query_text)
    if not decision.accepted:
        click.echo(click.style(f"REJECTED: {decision.reason}", fg="red"))
        sys.exit(1)

    try:
        variables = validate_variables(variables_text)
    except InvalidVariables as exc:
        click.echo(click.style(f"REJECTED: {exc}", fg="red"))
        sys.exit(1)

    suffix = f" ({len(variables)} variable(s))" if variables else ""
    click.echo(click.style(f"ACCEPTED{suffix}", fg="green"))


# ---------------------------------------------------------------------------
# audit
# ---------------------------------------------------------------------------


@main.command("audit")
@click.option(
    "--log-file",
    "log_file",
    required=True,
    type=click.Path(dir_okay=False),
    help="File holding captured stderr output of 'aumai-cfguard serve'.",
)
@click.option(
    "--since",
    "since_spec",
    default="1h",
    show_default=True,
    help=f"Show records from the last N {_DURATION_HELP} (e.g. '30m', '2h', '3600s').",
)
@click.option("--failures-only", is_flag=True, default=False, help="Only show failed calls.")
@click.option(
    "--output",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
)
def audit_command(
    log_file: str, since_spec: str, failures_only: bool, output_format: str
) -> None:
    """Show recent audit records from a captured log file.

    Lines that are not JSON audit records (other log events, tracebacks)
    are skipped.
    """
    log_path = Path(log_file)
    if not log_path.exists():
        click.echo(f"Audit log not found: {log_file}")
        return

    cutoff = datetime.datetime.now(datetime.UTC) - _parse_duration(since_spec)

    try:
        lines = log_path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        click.echo(click.style(f"error reading audit log: {exc}", fg="red"), err=True)
        sys.exit(1)

    records = [
        record
        for record in (_parse_audit_line(line) for line in lines)
        if record is not None
        and record.timestamp >= cutoff
        and not (failures_only and record.outcome is Outcome.SUCCESS)
    ]

    if not records:
        click.echo(f"No audit records since {cutoff.isoformat()}")
        return

    if output_format == "json":
        click.echo(json.dumps([r.model_dump(mode="json") for r in records], indent=2))
        return

    click.echo(f"Audit log: {len(records)} record(s) since {cutoff.isoformat()}")
    click.echo("-" * 70)
    for record in records:
        ok = record.outcome is Outcome.SUCCESS
        status = "OK  " if ok else "FAIL"
        detail = f" {record.error_summary}" if record.error_summary else ""
        click.echo(
            click.style(
                f"  [{status}] {record.timestamp.isoformat()} "
                f"{record.operation} {record.duration_ms}ms{detail}",
                fg="green" if ok else "red",
            )
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _parse_audit_line(line: str) -> AuditRecord | None:
    """Return the audit record on *line*, or ``None`` for any other line."""
    try:
        data: Any = json.loads(line)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict) or data.get("event") != "audit":
        return None
    try:
        record = AuditRecord.model_validate(data)
    except pydantic.ValidationError:
        return None
    if record.timestamp.tzinfo is None:
        record.timestamp = record.timestamp.replace(tzinfo=datetime.UTC)
    return record


def _parse_duration(spec: str) -> datetime.timedelta:
    """Parse a duration string like '30m', '2h', '3600s' into a timedelta."""
    match = _DURATION_PATTERN.match(spec.strip())
    if not match:
        raise click.BadParameter(
            f"Invalid duration '{spec}'."
            f" Expected <number>[{'|'.join(_DURATION_UNITS)}], e.g. '30m', '2h', '3600s'."
        )
    value = float(match.group(1))
    unit = match.group(2).lower()
    seconds_per_unit = _DURATION_UNITS[unit][1] if unit else 1
    return datetime.timedelta(seconds=value * seconds_per_unit)


if __name__ == "__main__":
    main()

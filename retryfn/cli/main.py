"""Command-line interface for retryfn."""

import logging
import sys
from datetime import timedelta
from itertools import islice
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from retryfn import __version__
from retryfn.core.config import get_config
from retryfn.core.exceptions import ConfigurationError, ValidationError
from retryfn.parsers import parse_policy, validate_policy
from retryfn.strategy.base import saturating_add

console = Console()


def _format_delay(delay: timedelta) -> str:
    return f"{delay.total_seconds() * 1000:,.3f} ms"


@click.group()
@click.version_option(version=__version__, prog_name="retryfn")
def cli() -> None:
    """retryfn - Retry with pluggable backoff."""
    config = get_config()
    logging.basicConfig(level=config.log_level.upper(), format=config.log_format)


@cli.command()
@click.argument("policy_path", type=click.Path(exists=True))
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of delays to show (defaults to RETRYFN_SCHEDULE_COUNT).",
)
def schedule(policy_path: str, count: Optional[int]) -> None:
    """Print the delay schedule of a backoff policy.

    Example:
        retryfn schedule policies/http_client.yaml --count 6
    """
    if count is None:
        count = get_config().schedule_count

    try:
        policy = parse_policy(policy_path)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=policy.name or policy.kind.value)
    table.add_column("Retry", justify="right")
    table.add_column("Delay", justify="right")
    table.add_column("Total delay", justify="right")

    total = timedelta(0)
    for n, delay in enumerate(islice(policy.delays(), count), start=1):
        total = saturating_add(total, delay)
        table.add_row(str(n), _format_delay(delay), _format_delay(total))

    console.print(table)
    if policy.max_retries is not None and policy.max_retries < count:
        console.print(
            f"[yellow]Schedule ends after {policy.max_retries} retries[/yellow]"
        )


@cli.command()
@click.argument("policy_path", type=click.Path(exists=True))
def validate(policy_path: str) -> None:
    """Validate a backoff policy YAML definition.

    Example:
        retryfn validate policies/http_client.yaml
    """
    console.print(f"[cyan]Validating policy: {policy_path}[/cyan]")

    if validate_policy(policy_path):
        policy = parse_policy(policy_path)
        console.print("[green]✓ Policy is valid[/green]")
        console.print(f"  Kind: {policy.kind.value}")
        console.print(f"  Delay: {policy.delay_ms} ms")
        if policy.max_retries is not None:
            console.print(f"  Max retries: {policy.max_retries}")
        sys.exit(0)
    else:
        console.print("[red]✗ Policy is invalid[/red]")
        sys.exit(1)


@cli.command()
def version() -> None:
    """Show retryfn version."""
    console.print(f"retryfn version {__version__}")


if __name__ == "__main__":
    cli()

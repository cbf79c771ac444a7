"""Register conversion command."""

import click
from ynab2ledger.cli.error_handling import handle_domain_error
from ynab2ledger.config import DEFAULT_MAPPING_PATH, DEFAULT_OUTPUT_PATH, ConvertConfig
from ynab2ledger.domain.conversion import convert_file
from ynab2ledger.domain.errors import DomainError


@click.command("convert")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=DEFAULT_OUTPUT_PATH,
    show_default=True,
    envvar="YNAB2LEDGER_OUTPUT",
    help="Output journal file path",
)
@click.option(
    "--mapping",
    "-m",
    type=click.Path(dir_okay=False),
    default=DEFAULT_MAPPING_PATH,
    show_default=True,
    envvar="YNAB2LEDGER_MAPPING",
    help="Chart of accounts mapping file",
)
@click.pass_context
def convert_register(ctx, input_file: str, output: str, mapping: str):
    """Convert a YNAB register export to a Ledger journal.

    Examples:
        ynab2ledger convert register.csv
        ynab2ledger convert register.csv -o 2020.dat -m coa.yaml
    """
    config = ConvertConfig(input_path=input_file, output_path=output, mapping_path=mapping)

    try:
        result = convert_file(config)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Detected delimiter: {result.delimiter!r}")
    if result.used_fallback:
        click.echo("Standard CSV parsing failed, used fallback method")
    click.echo(f"  Entries: {len(result.entries)}")
    click.echo(f"  Skipped: {len(result.skipped)} rows")
    click.echo(f"Successfully converted to {output}")


def register_commands(cli):
    """Register convert command with main CLI."""
    cli.add_command(convert_register)

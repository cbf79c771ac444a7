"""Chart of accounts generation command."""

import click
from ynab2ledger.cli.error_handling import handle_domain_error
from ynab2ledger.domain.chart_of_accounts import generate_coa
from ynab2ledger.domain.errors import DomainError


@click.command("gen-coa")
@click.argument("register_csv", type=click.Path(exists=True, dir_okay=False))
@click.argument("coa_yaml", type=click.Path(dir_okay=False))
@click.pass_context
def gen_coa(ctx, register_csv: str, coa_yaml: str):
    """Generate a chart of accounts YAML from a YNAB register CSV.

    Every account and category found in the export gets a suggested
    ledger account. Edit the file before using it with 'convert'.
    """
    try:
        chart = generate_coa(register_csv, coa_yaml)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)
        return

    # The wildcard entries are not counted
    click.echo(
        f"Wrote {len(chart['accounts']) - 1} accounts and "
        f"{len(chart['categories']) - 1} categories to {coa_yaml}"
    )


def register_commands(cli):
    """Register gen-coa command with main CLI."""
    cli.add_command(gen_coa)

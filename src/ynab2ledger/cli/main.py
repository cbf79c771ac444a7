"""Main CLI entry point."""

import logging

import click
from ynab2ledger.logging_config import configure_logging

# Import and register all commands at module level
from ynab2ledger.cli.commands import convert, gen_coa, version


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug output, including a file preview")
def cli(verbose: bool):
    """ynab2ledger - Convert YNAB register exports to Ledger journals.

    Processes the Register CSV export from YNAB (You Need a Budget) and
    creates a journal file usable with Ledger or hledger. Dates are expected
    in mm/dd/yyyy format and numbers use a period (.) as decimal separator.
    """
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)


# Register all commands
convert.register_commands(cli)
gen_coa.register_commands(cli)
version.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

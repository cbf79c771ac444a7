"""Version command."""

import click
from ynab2ledger import __version__


@click.command("version")
def version():
    """Print the version number."""
    click.echo(f"YNAB to Ledger Converter v{__version__}")


def register_commands(cli):
    """Register version command with main CLI."""
    cli.add_command(version)

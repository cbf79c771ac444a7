"""Shared pytest fixtures for ynab2ledger tests."""

from pathlib import Path
import pytest

from ynab2ledger.domain.entities import MappingTable
from ynab2ledger.logging_config import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Undo logging setup done by CLI invocations."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def sample_mapping():
    """Mapping covering the accounts and categories in the sample register."""
    return MappingTable.from_dict(
        {
            "accounts": {
                "Checking": "Assets:Checking",
                "Credit Card": "Liabilities:Credit-Card",
                "American Express": "Liabilities:Amex",
            },
            "categories": {
                "Inflow: To be Budgeted": "Income:Salary",
                "Just for Fun: Dining Out": "Expenses:Food:Dining",
            },
        }
    )


@pytest.fixture
def register_header():
    """Header line of a YNAB register export."""
    return (
        '"Account","Flag","Date","Payee","Category Group/Category",'
        '"Category Group","Category","Memo","Outflow","Inflow","Cleared"'
    )


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file and return its path."""

    def _write(text: str, name: str = "register.csv") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"

"""Mapping file loading."""

from pathlib import Path

import yaml

from ynab2ledger.domain.entities import MappingTable
from ynab2ledger.domain.errors import MappingError


def load_mapping(path: str | Path) -> MappingTable:
    """Load an account/category mapping from a YAML file.

    The document holds two optional sections, ``accounts`` and
    ``categories``, each mapping an export label to a ledger account.

    Args:
        path: Path to the YAML mapping file

    Returns:
        MappingTable built from the file

    Raises:
        FileNotFoundError: If the file does not exist
        MappingError: If the file is not valid YAML or has the wrong shape
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MappingError(f"Could not parse mapping file '{path}': {e}") from e

    if data is not None and not isinstance(data, dict):
        raise MappingError(f"Mapping file '{path}' must contain a mapping at the top level")

    return MappingTable.from_dict(data)

"""Conversion configuration."""

from dataclasses import dataclass

DEFAULT_OUTPUT_PATH = "ynab_ledger.dat"
DEFAULT_MAPPING_PATH = "coa.yaml"
DEFAULT_PREVIEW_LINES = 5


@dataclass(frozen=True)
class ConvertConfig:
    """Settings for a single conversion run.

    Built by the CLI from its options and handed to the core explicitly.
    """

    input_path: str
    output_path: str = DEFAULT_OUTPUT_PATH
    mapping_path: str = DEFAULT_MAPPING_PATH
    preview_lines: int = DEFAULT_PREVIEW_LINES

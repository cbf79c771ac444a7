"""Integration tests for end-to-end workflows."""

import yaml

from ynab2ledger.cli.main import cli


def test_full_workflow(cli_runner, fixtures_dir, tmp_path):
    """Test complete workflow: gen-coa → edit mapping → convert."""
    coa_path = tmp_path / "coa.yaml"
    ledger_path = tmp_path / "ynab_ledger.dat"

    # Step 1: Generate a starter chart of accounts
    result = cli_runner.invoke(cli, ["gen-coa", str(fixtures_dir / "register.csv"), str(coa_path)])
    assert result.exit_code == 0

    # Step 2: Adjust the suggested names
    with open(coa_path, encoding="utf-8") as f:
        chart = yaml.safe_load(f)
    chart["accounts"]["American Express"] = "Liabilities:Amex"
    chart["categories"]["Inflow: To be Budgeted"] = "Income:Salary"
    with open(coa_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(chart, f, sort_keys=False)

    # Step 3: Convert
    result = cli_runner.invoke(
        cli,
        ["convert", str(fixtures_dir / "register.csv"), "-o", str(ledger_path), "-m", str(coa_path)],
    )
    assert result.exit_code == 0

    assert ledger_path.read_text(encoding="utf-8") == (
        "2020/12/18 Transfer : American Express\n"
        "    Liabilities:Amex  $194.17\n"
        "    Assets:Bank:Checking  \n"
        "\n"
        "2020/12/28 Some Restaurant\n"
        "    Expenses:JustforFunDiningOut  $41.04\n"
        "    Assets:Bank:CreditCard  \n"
        "\n"
        "2020/12/30 ACH Credit\n"
        "    Income:Salary  \n"
        "    Assets:Bank:Checking  $100.45\n"
    )


def test_malformed_export_converts(cli_runner, tmp_path):
    """BOM, CRLF, semicolons and stray quotes in one export still convert."""
    mapping_path = tmp_path / "coa.yaml"
    mapping_path.write_text(
        'accounts:\n  "*": Assets:Bank\ncategories:\n  "*": Expenses:Misc\n', encoding="utf-8"
    )
    text = (
        "\ufeffAccount;Date;Payee;Category Group/Category;Memo;Outflow;Inflow\r\n"
        'Checking;02/02/2021;Joe"s Diner;Food;;€12.50;€0\r\n'
        "Checking;02/01/2021;Salary;Income;January;€0;€2000.00\r\n"
    )
    csv_path = tmp_path / "export.csv"
    csv_path.write_bytes(text.encode("utf-8"))
    ledger_path = tmp_path / "out.dat"

    result = cli_runner.invoke(
        cli, ["convert", str(csv_path), "-o", str(ledger_path), "-m", str(mapping_path)]
    )

    assert result.exit_code == 0
    assert "Detected delimiter: ';'" in result.output
    assert ledger_path.read_text(encoding="utf-8") == (
        "2021/02/01 SalaryJanuary\n"
        "    Expenses:Misc  \n"
        "    Assets:Bank  €2000.00\n"
        "\n"
        '2021/02/02 Joe"s Diner\n'
        "    Expenses:Misc  €12.50\n"
        "    Assets:Bank  \n"
    )

from decimal import Decimal

from csv_importer import import_csv
from ledger import Ledger, INCOME, EXPENSE
from report_exporter import export_csv


def test_import_posts_rows_and_creates_categories(tmp_path):
    csv_file = tmp_path / "tx.csv"
    csv_file.write_text(
        "Type,Category,Amount\n"
        "Income,Salary,\"$1,500.00\"\n"
        "expense,Groceries,42.10\n"
        "Expense,General,8\n"
    )
    ledger = Ledger.default()

    imported, skipped = import_csv(ledger, str(csv_file))

    assert (imported, skipped) == (3, 0)
    assert ledger.income_categories["Salary"] == Decimal('1500')
    assert ledger.expense_categories["Groceries"] == Decimal('42.10')
    assert ledger.budget == Decimal('1449.90')
    assert len(ledger.display_log) == 3


def test_import_skips_bad_rows_and_respects_limits(tmp_path):
    csv_file = tmp_path / "tx.csv"
    csv_file.write_text(
        "Type,Category,Amount\n"
        "Expense,Rent,400\n"
        "Expense,Rent,200\n"
        "Transfer,General,5\n"
        "Income,General,abc\n"
        "Income,,5\n"
    )
    ledger = Ledger.default()
    ledger.add_category(EXPENSE, "Rent", "500")

    imported, skipped = import_csv(ledger, str(csv_file))

    assert (imported, skipped) == (1, 4)
    assert ledger.expense_categories["Rent"] == Decimal('400')
    assert ledger.budget == Decimal('-400')


def test_import_missing_file_or_columns(tmp_path):
    ledger = Ledger.default()
    bad = tmp_path / "bad.csv"
    bad.write_text("Date,Description\n2024-01-01,Coffee\n")

    assert import_csv(ledger, str(tmp_path / "missing.csv")) == (0, 0)
    assert import_csv(ledger, str(bad)) == (0, 0)
    assert ledger.display_log == []


def test_exported_csv_imports_into_fresh_ledger(tmp_path):
    source = Ledger.default()
    source.add_category(INCOME, "Salary")
    source.add_income("Salary", "300")
    source.add_expense("General", "20")
    csv_file = tmp_path / "log.csv"
    export_csv(source, str(csv_file))

    target = Ledger.default()
    import_csv(target, str(csv_file))

    assert target.income_categories == source.income_categories
    assert target.budget == source.budget


def test_import_directory_or_empty_file(tmp_path):
    ledger = Ledger.default()
    empty = tmp_path / "empty.csv"
    empty.write_text("")

    assert import_csv(ledger, str(tmp_path)) == (0, 0)
    assert import_csv(ledger, str(empty)) == (0, 0)
    assert ledger.display_log == []

from decimal import Decimal

from db_utils import load_ledger
from ledger import Ledger
from main import run_menu


def test_menu_session_saves_on_exit(monkeypatch, tmp_path):
    db_file = str(tmp_path / "ledger.db")
    export_file = tmp_path / "financial_data.txt"
    answers = iter([
        "3", "Salary",
        "1", "2", "1000",
        "4", "Rent", "500",
        "2", "2", "600",   # over the limit, rejected
        "2", "2", "500",
        "6",
        "x",
        "q",
    ])
    monkeypatch.setattr('builtins.input', lambda prompt="": next(answers))

    run_menu(Ledger.default(), db_file, str(export_file))

    loaded = load_ledger(db_file)
    assert loaded.income_categories["Salary"] == Decimal('1000')
    assert loaded.expense_categories["Rent"] == Decimal('500')
    assert loaded.budget == Decimal('500')
    assert export_file.read_text().splitlines() == [
        "Financial Data:",
        "Income, Salary, $1000.00",
        "Expense, Rent, $500.00",
        "",
        "Current Budget: $500.00",
    ]


def test_menu_exports_csv(monkeypatch, tmp_path):
    csv_file = tmp_path / "session.csv"
    answers = iter([
        "1", "1", "75",
        "9", str(csv_file),
        "q",
    ])
    monkeypatch.setattr('builtins.input', lambda prompt="": next(answers))

    run_menu(Ledger.default(), str(tmp_path / "ledger.db"), str(tmp_path / "report.txt"))

    assert csv_file.read_text().splitlines() == ["Type,Category,Amount", "Income,General,75.00"]

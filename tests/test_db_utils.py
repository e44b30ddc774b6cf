import sqlite3
from decimal import Decimal

from db_utils import load_ledger, save_ledger, set_setting, get_setting, create_connection
from ledger import Ledger, ErrorKind, INCOME, EXPENSE


def _sample_ledger():
    ledger = Ledger.default()
    ledger.add_category(INCOME, "Salary")
    ledger.add_category(EXPENSE, "Rent", "500")
    ledger.add_category(EXPENSE, "Food")
    ledger.add_income("Salary", "1000.25")
    ledger.add_expense("Rent", "450")
    ledger.add_expense("Food", "12.34")
    return ledger


def test_missing_file_gives_default(tmp_path):
    ledger = load_ledger(str(tmp_path / "none.db"))

    assert ledger.income_categories == {"General": 0}
    assert ledger.expense_categories == {"General": 0}
    assert ledger.budget == 0


def test_save_then_load_round_trip(tmp_path):
    db_file = str(tmp_path / "ledger.db")
    original = _sample_ledger()

    assert save_ledger(original, db_file).ok
    loaded = load_ledger(db_file)

    assert loaded.income_categories == original.income_categories
    assert loaded.expense_categories == original.expense_categories
    assert loaded.category_limits == {"Rent": Decimal('500')}
    assert loaded.budget == Decimal('537.91')
    assert list(loaded.expense_categories) == ["General", "Rent", "Food"]
    # the display log is session-only
    assert loaded.display_log == []


def test_limits_still_enforced_after_reload(tmp_path):
    db_file = str(tmp_path / "ledger.db")
    save_ledger(_sample_ledger(), db_file)

    loaded = load_ledger(db_file)

    assert loaded.add_expense("Rent", "50").ok
    assert loaded.add_expense("Rent", "0.01").error == ErrorKind.LIMIT_EXCEEDED


def test_stored_budget_is_ignored(tmp_path):
    db_file = str(tmp_path / "ledger.db")
    save_ledger(_sample_ledger(), db_file)
    conn = create_connection(db_file)
    set_setting(conn, 'budget', '999999')
    conn.commit()
    assert get_setting(conn, 'budget') == '999999'
    conn.close()

    assert load_ledger(db_file).budget == Decimal('537.91')


def test_second_save_replaces_first(tmp_path):
    db_file = str(tmp_path / "ledger.db")
    save_ledger(_sample_ledger(), db_file)

    save_ledger(Ledger.default(), db_file)
    loaded = load_ledger(db_file)

    assert loaded.income_categories == {"General": 0}
    assert loaded.category_limits == {}


def test_corrupt_file_gives_default(tmp_path):
    db_file = tmp_path / "ledger.db"
    db_file.write_bytes(b"this is not a sqlite database at all" * 10)

    ledger = load_ledger(str(db_file))

    assert ledger.expense_categories == {"General": 0}
    assert ledger.budget == 0


def test_other_schema_gives_default(tmp_path):
    db_file = str(tmp_path / "ledger.db")
    conn = sqlite3.connect(db_file)
    conn.execute("CREATE TABLE categories (id INTEGER PRIMARY KEY, name TEXT)")
    conn.commit()
    conn.close()

    assert load_ledger(db_file).income_categories == {"General": 0}


def test_bad_stored_amount_gives_default(tmp_path):
    db_file = str(tmp_path / "ledger.db")
    save_ledger(_sample_ledger(), db_file)
    conn = sqlite3.connect(db_file)
    conn.execute("UPDATE income_categories SET total = 'lots' WHERE name = 'Salary'")
    conn.commit()
    conn.close()

    assert "Salary" not in load_ledger(db_file).income_categories


def test_save_failure_reports_io_failure(tmp_path):
    ledger = _sample_ledger()
    budget_before = ledger.budget

    # a directory can't be opened as a database file
    result = save_ledger(ledger, str(tmp_path))

    assert not result.ok
    assert result.error == ErrorKind.IO_FAILURE
    assert ledger.budget == budget_before


def test_save_replaces_tables_from_other_schema_version(tmp_path):
    db_file = str(tmp_path / "ledger.db")
    conn = sqlite3.connect(db_file)
    conn.execute("CREATE TABLE income_categories (name TEXT PRIMARY KEY, total REAL)")
    conn.execute("CREATE TABLE app_settings (key TEXT PRIMARY KEY, value TEXT)")
    conn.execute("INSERT INTO app_settings (key, value) VALUES ('schema_version', '0')")
    conn.commit()
    conn.close()
    ledger = load_ledger(db_file)
    assert ledger.income_categories == {"General": 0}
    ledger.add_income("General", "40")

    result = save_ledger(ledger, db_file)
    loaded = load_ledger(db_file)

    assert result.ok
    assert loaded.income_categories == {"General": Decimal('40')}
    assert loaded.budget == Decimal('40')

# db_utils.py
# Functions for saving and restoring the ledger in SQLite

import os
import sqlite3
from decimal import Decimal, InvalidOperation

from database_setup import create_tables, drop_tables, SCHEMA_VERSION
from ledger import Ledger, Result, ErrorKind

DB_FILE = 'budget_ledger.db'

# --- Connection ---
def create_connection(db_file=DB_FILE):
    """ Create a database connection to the SQLite database """
    conn = None
    try:
        conn = sqlite3.connect(db_file)
        conn.row_factory = sqlite3.Row
        return conn
    except sqlite3.Error as e:
        print(f"Error connecting to database: {e}")
        return None

# --- Settings ---
def get_setting(conn, key, default=None):
    """ Retrieves a setting value from the app_settings table. Raises sqlite3.Error. """
    cursor = conn.cursor()
    try:
        cursor.execute("SELECT value FROM app_settings WHERE key = ?;", (key,))
        result = cursor.fetchone()
        return result['value'] if result else default
    finally:
        cursor.close()

def set_setting(conn, key, value):
    """ Inserts or replaces a setting. Value stored as TEXT. Does not commit. """
    cursor = conn.cursor()
    try:
        cursor.execute("INSERT OR REPLACE INTO app_settings (key, value) VALUES (?, ?);", (key, str(value)))
    finally:
        cursor.close()

# --- Reading ---
def _read_amounts(conn, table, value_col, order_by=None):
    """ name -> Decimal for one table. Raises on bad data so the whole load falls back. """
    cursor = conn.cursor()
    try:
        sql = f"SELECT name, {value_col} AS amount FROM {table}"
        if order_by: sql += f" ORDER BY {order_by}"
        cursor.execute(sql)
        amounts = {}
        for row in cursor.fetchall():
            value = Decimal(str(row['amount']))
            if not value.is_finite() or value < 0:
                raise InvalidOperation(f"bad amount {row['amount']!r} for '{row['name']}' in {table}")
            amounts[row['name']] = value
        return amounts
    finally:
        cursor.close()

def load_ledger(db_file=DB_FILE):
    """
    Restores the ledger saved in db_file.

    Any problem (no file, not a database, missing tables, other schema
    version, bad amounts) gives the default ledger instead. The stored
    budget is never read back; it is recomputed from the category totals.
    """
    if not os.path.exists(db_file):
        print(f"No saved data at '{db_file}'. Starting with a new ledger.")
        return Ledger.default()

    conn = create_connection(db_file)
    if conn is None:
        return Ledger.default()
    try:
        version = get_setting(conn, 'schema_version')
        if version != SCHEMA_VERSION:
            print(f"Saved data in '{db_file}' has schema version {version!r}, expected {SCHEMA_VERSION}. Starting with a new ledger.")
            return Ledger.default()
        income = _read_amounts(conn, 'income_categories', 'total', order_by='position')
        expense = _read_amounts(conn, 'expense_categories', 'total', order_by='position')
        limits = _read_amounts(conn, 'category_limits', 'limit_amount')
    except (sqlite3.Error, InvalidOperation) as e:
        print(f"Could not load saved data from '{db_file}': {e}. Starting with a new ledger.")
        return Ledger.default()
    finally:
        conn.close()

    if not income and not expense:
        return Ledger.default()
    dropped = sorted(set(limits) - set(expense))
    if dropped: print(f"Ignoring limits for unknown expense categories: {', '.join(dropped)}")
    return Ledger(income, expense, limits)

# --- Writing ---
def _stored_schema_version(conn):
    """ schema_version from app_settings, or None when there is no usable settings table. """
    try:
        return get_setting(conn, 'schema_version')
    except sqlite3.OperationalError:
        return None

def save_ledger(ledger, db_file=DB_FILE):
    """
    Replaces the saved state in db_file with the ledger's category maps,
    limits and budget, in one transaction. The ledger itself is not touched.
    """
    try:
        conn = sqlite3.connect(db_file)
        conn.row_factory = sqlite3.Row
    except sqlite3.Error as e:
        print(f"Error connecting to database: {e}")
        return Result.failure(ErrorKind.IO_FAILURE, "Error saving data.")

    cursor = None
    try:
        stored_version = _stored_schema_version(conn)
        if stored_version != SCHEMA_VERSION:
            if stored_version is not None: print(f"Replacing saved data with schema version {stored_version!r}.")
            drop_tables(conn)
        create_tables(conn)
        cursor = conn.cursor()
        for table, categories in (('income_categories', ledger.income_categories),
                                  ('expense_categories', ledger.expense_categories)):
            cursor.execute(f"DELETE FROM {table};")
            cursor.executemany(f"INSERT INTO {table} (name, total, position) VALUES (?, ?, ?);",
                               [(name, str(total), pos) for pos, (name, total) in enumerate(categories.items())])
        cursor.execute("DELETE FROM category_limits;")
        cursor.executemany("INSERT INTO category_limits (name, limit_amount) VALUES (?, ?);",
                           [(name, str(limit)) for name, limit in ledger.category_limits.items()])
        set_setting(conn, 'budget', ledger.budget)
        set_setting(conn, 'schema_version', SCHEMA_VERSION)
        conn.commit()
        return Result.success(f"Data saved to {db_file}.")
    except sqlite3.Error as e:
        print(f"DB error saving ledger to '{db_file}': {e}")
        try: conn.rollback()
        except sqlite3.Error as rollback_e: print(f"Rollback failed: {rollback_e}")
        return Result.failure(ErrorKind.IO_FAILURE, "Error saving data.")
    finally:
        if cursor: cursor.close()
        conn.close()

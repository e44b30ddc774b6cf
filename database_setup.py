# database_setup.py
# Schema for the persisted ledger state
# Run directly to create an empty ledger database

import sqlite3

SCHEMA_VERSION = '1'

SQL_CREATE_INCOME_TABLE = """
CREATE TABLE IF NOT EXISTS income_categories (
    name TEXT PRIMARY KEY NOT NULL,
    total TEXT NOT NULL,      -- Store as TEXT for Decimal
    position INTEGER NOT NULL -- Insertion order
);
"""
SQL_CREATE_EXPENSE_TABLE = """
CREATE TABLE IF NOT EXISTS expense_categories (
    name TEXT PRIMARY KEY NOT NULL,
    total TEXT NOT NULL,
    position INTEGER NOT NULL
);
"""
SQL_CREATE_LIMITS_TABLE = """
CREATE TABLE IF NOT EXISTS category_limits (
    name TEXT PRIMARY KEY NOT NULL,
    limit_amount TEXT NOT NULL,
    FOREIGN KEY (name) REFERENCES expense_categories (name)
);
"""
SQL_CREATE_APP_SETTINGS_TABLE = """
CREATE TABLE IF NOT EXISTS app_settings (
    key TEXT PRIMARY KEY NOT NULL UNIQUE,
    value TEXT
);
"""

ALL_TABLES = (
    ('income_categories', SQL_CREATE_INCOME_TABLE),
    ('expense_categories', SQL_CREATE_EXPENSE_TABLE),
    ('category_limits', SQL_CREATE_LIMITS_TABLE),
    ('app_settings', SQL_CREATE_APP_SETTINGS_TABLE),
)

def create_tables(conn):
    """
    Creates any missing ledger tables on an open connection.
    Raises sqlite3.Error so the caller can roll back its own work.
    """
    cursor = conn.cursor()
    try:
        for _, sql in ALL_TABLES:
            cursor.execute(sql)
    finally:
        cursor.close()

def drop_tables(conn):
    """ Drops every ledger table, e.g. ones left behind by another schema version. """
    cursor = conn.cursor()
    try:
        for name, _ in ALL_TABLES:
            cursor.execute(f"DROP TABLE IF EXISTS {name};")
    finally:
        cursor.close()

def main(db_file=None):
    # Imported here; db_utils imports this module for the schema
    import db_utils
    db_file = db_file or db_utils.DB_FILE
    conn = db_utils.create_connection(db_file)
    if conn is None:
        print("Error! Cannot create the database connection.")
        return False
    try:
        print("\nCreating tables...")
        create_tables(conn)
        cursor = conn.cursor()
        cursor.execute("INSERT OR IGNORE INTO app_settings (key, value) VALUES ('schema_version', ?)", (SCHEMA_VERSION,))
        cursor.close()
        conn.commit()
        for name, _ in ALL_TABLES: print(f"Table '{name}' checked/created successfully.")
        return True
    except sqlite3.Error as e:
        print(f"Error creating tables: {e}")
        return False
    finally:
        conn.close()
        print("Database setup complete. Connection closed.")

if __name__ == '__main__':
    main()

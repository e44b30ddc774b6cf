# csv_importer.py
# Posts transactions from a CSV file (Type, Category, Amount) into the ledger

import os

import pandas as pd

from ledger import normalize_kind, ErrorKind

TYPE_COL, CATEGORY_COL, AMOUNT_COL = 'Type', 'Category', 'Amount'

def import_csv(ledger, csv_filepath):
    """
    Records every row of the CSV through the ledger, so amount checks and
    spending limits apply exactly as for typed-in transactions. Categories
    that don't exist yet are created without a limit.

    :param ledger: Ledger to post into
    :param csv_filepath: Path to the CSV file
    :return: Tuple (imported_count, skipped_count)
    """
    if not os.path.exists(csv_filepath):
        print(f"Error: File not found: {csv_filepath}")
        return 0, 0

    print(f"\n--- Importing: {csv_filepath} ---")
    try:
        try:
            df = pd.read_csv(csv_filepath, encoding='utf-8', keep_default_na=False, dtype=str)
        except UnicodeDecodeError:
            print("UTF-8 failed, trying latin1...")
            df = pd.read_csv(csv_filepath, encoding='latin1', keep_default_na=False, dtype=str)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        print(f"Import Error: {e}")
        return 0, 0
    print(f"CSV loaded: {len(df)} rows.")

    for col in (TYPE_COL, CATEGORY_COL, AMOUNT_COL):
        if col not in df.columns:
            print(f"Error: Column '{col}' not found!")
            return 0, 0

    imported_count = 0
    skipped_count = 0
    new_cats = set()
    for idx, row in df.iterrows():
        kind = normalize_kind(row[TYPE_COL])
        category = str(row[CATEGORY_COL]).strip()
        if kind is None or not category:
            print(f"Skipping row {idx}: missing or unknown type/category.")
            skipped_count += 1
            continue

        if category not in ledger.categories(kind):
            if ledger.add_category(kind, category):
                new_cats.add((kind, category))
                print(f"Adding new {kind.lower()} category: '{category}'")

        result = ledger.record_transaction(kind, category, row[AMOUNT_COL])
        if result:
            imported_count += 1
        else:
            reason = "limit exceeded" if result.error == ErrorKind.LIMIT_EXCEEDED else result.message
            print(f"Skipping row {idx} ({kind}, {category}, {row[AMOUNT_COL]}): {reason}")
            skipped_count += 1

    print(f"\n--- Import complete ---")
    print(f"Imported: {imported_count} rows. Skipped: {skipped_count} rows.")
    if new_cats: print(f"Added {len(new_cats)} new categories.")
    return imported_count, skipped_count

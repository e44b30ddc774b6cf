# report_exporter.py
# Writes the session's transactions and the current budget to disk

import pandas as pd

from ledger import Result, ErrorKind
from utils import format_money

EXPORT_FILE = 'financial_data.txt'
CSV_EXPORT_FILE = 'financial_data.csv'
CSV_COLUMNS = ['Type', 'Category', 'Amount']

def format_report_lines(ledger):
    """ Report text as a list of lines, without trailing newlines. """
    lines = ["Financial Data:"]
    for kind, category, amount in ledger.display_log:
        lines.append(f"{kind}, {category}, {format_money(amount)}")
    lines.append("")
    lines.append(f"Current Budget: {format_money(ledger.budget)}")
    return lines

def format_summary(ledger):
    """ Category summary text for a dialog or the console. """
    return ledger.summarize()

def export_report(ledger, destination=EXPORT_FILE):
    """
    Writes header, one line per logged transaction, a blank line and the
    budget line. A failed write may leave a partial file behind.
    """
    try:
        with open(destination, 'w', encoding='utf-8') as f:
            for line in format_report_lines(ledger):
                f.write(line + "\n")
    except OSError as e:
        print(f"Error exporting data to '{destination}': {e}")
        return Result.failure(ErrorKind.IO_FAILURE, "Error exporting data.")
    return Result.success(f"Data exported successfully to {destination}", value=destination)

def display_log_frame(ledger):
    """ The display log as a DataFrame with Type/Category/Amount columns. """
    rows = [(kind, category, f"{amount:.2f}") for kind, category, amount in ledger.display_log]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)

def export_csv(ledger, destination):
    """ Writes the display log as CSV, readable again by csv_importer.import_csv. """
    try:
        display_log_frame(ledger).to_csv(destination, index=False)
    except OSError as e:
        print(f"Error exporting CSV to '{destination}': {e}")
        return Result.failure(ErrorKind.IO_FAILURE, "Error exporting data.")
    return Result.success(f"Transactions exported successfully to {destination}", value=destination)

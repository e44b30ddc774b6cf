# main.py
# Console entry point for the Budget Ledger

import traceback

from db_utils import DB_FILE, load_ledger, save_ledger
from ledger import INCOME, EXPENSE
from csv_importer import import_csv
from report_exporter import EXPORT_FILE, CSV_EXPORT_FILE, export_report, export_csv
from budget_manager import add_transaction_prompt, add_category_prompt, view_summary, view_limits
from utils import format_money

def exit_app(ledger, db_file=DB_FILE):
    """ Saves before leaving. Returns the save Result; the caller exits either way. """
    result = save_ledger(ledger, db_file)
    print(result.message)
    return result

def run_menu(ledger, db_file=DB_FILE, export_file=EXPORT_FILE):
    while True:
        print(f"\n--- Budget Ledger --- Current Budget: {format_money(ledger.budget)}")
        print("1: Add Income            2: Add Expense")
        print("3: Add Income Category   4: Add Expense Category")
        print("5: View Summary          6: Export Data")
        print("7: Import CSV            8: View Limits")
        print("9: Export CSV")
        print("s: Save                  q: Exit")
        choice = input("Enter choice: ").strip().lower()

        try: # Wrap menu actions in a general try/except
            if choice == '1': add_transaction_prompt(ledger, INCOME)
            elif choice == '2': add_transaction_prompt(ledger, EXPENSE)
            elif choice == '3': add_category_prompt(ledger, INCOME)
            elif choice == '4': add_category_prompt(ledger, EXPENSE)
            elif choice == '5': view_summary(ledger)
            elif choice == '6': print(export_report(ledger, export_file).message)
            elif choice == '7':
                csv_path = input("Enter CSV file path: ").strip()
                if csv_path: import_csv(ledger, csv_path)
                else: print("No path entered.")
            elif choice == '8': view_limits(ledger)
            elif choice == '9':
                csv_path = input(f"CSV file path (blank for {CSV_EXPORT_FILE}): ").strip() or CSV_EXPORT_FILE
                print(export_csv(ledger, csv_path).message)
            elif choice == 's': print(save_ledger(ledger, db_file).message)
            elif choice == 'q': break
            else: print("Invalid choice.")
        except Exception as e:
            print(f"\n--- An Error Occurred ---")
            print(f"Error: {e}")
            print("Please check the input or data and try again.")
            traceback.print_exc()
            print("--------------------------")

    exit_app(ledger, db_file)
    print("Goodbye!")

def main():
    ledger = load_ledger(DB_FILE)
    try:
        run_menu(ledger)
    except (KeyboardInterrupt, EOFError):
        print()
        exit_app(ledger)

if __name__ == '__main__':
    main()

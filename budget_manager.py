# budget_manager.py
# Console actions for the ledger: transactions, categories, summary and limits

from ledger import EXPENSE
from utils import get_string_input, format_money

def choose_category(ledger, kind):
    """ Lists the categories of one kind and returns the chosen name, or None. """
    names = list(ledger.categories(kind))
    print(f"\n{kind} categories:")
    for i, name in enumerate(names):
        print(f"  {i+1}: {name}")
    cat_choice = input("Category #: ").strip()
    try:
        idx = int(cat_choice) - 1
    except ValueError:
        print("Invalid input. Please enter a number.")
        return None
    if 0 <= idx < len(names):
        return names[idx]
    print("Invalid category number.")
    return None

def add_transaction_prompt(ledger, kind):
    """ Asks for a category and an amount, then posts it. Returns the Result or None if cancelled. """
    category = choose_category(ledger, kind)
    if category is None:
        return None
    # Raw text goes to the ledger so its own amount check reports the problem
    amount_str = input(f"{kind} amount for '{category}': $").strip()
    result = ledger.record_transaction(kind, category, amount_str)
    print(result.message)
    if result:
        print(f"Current Budget: {format_money(ledger.budget)}")
    return result

def add_category_prompt(ledger, kind):
    """ Asks for a new category name (and a limit for expenses). """
    name = get_string_input(f"New {kind.lower()} category name: ", allow_empty=True)
    limit_str = None
    if kind == EXPENSE and name and name.strip() not in ledger.expense_categories:
        limit_str = input("Set spending limit for this category (blank for none): $").strip()
    result = ledger.add_category(kind, name, limit_str)
    print(result.message)
    return result

def view_summary(ledger):
    """ Prints the category summary and the overall totals. """
    print("\n" + ledger.summarize())
    print("-" * 40)
    print("{:<20} {:>15}".format("Total Income", format_money(ledger.total_income())))
    print("{:<20} {:>15}".format("Total Expenses", format_money(ledger.total_expense())))
    print("{:<20} {:>15}".format("Current Budget", format_money(ledger.budget)))

def view_limits(ledger):
    """ Spent vs limit for every expense category that has one. """
    if not ledger.category_limits:
        print("No spending limits set.")
        return
    print("\n{:<25} | {:>12} | {:>12} | {:>12}".format("Category", "Spent", "Limit", "Remaining"))
    print("-" * 70)
    for name, limit in ledger.category_limits.items():
        spent = ledger.expense_categories[name]
        print("{:<25} | {:>12} | {:>12} | {:>12}".format(name, format_money(spent), format_money(limit), format_money(ledger.remaining_for(name))))
    print("-" * 70)


# ledger.py
# The budget ledger: category totals, spending limits and the running budget.
# Pure state and validation; windows and menus talk to it through Result values.

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from utils import ZERO, parse_decimal, parse_amount, parse_limit, format_money

DEFAULT_CATEGORY = 'General'
INCOME = 'Income'
EXPENSE = 'Expense'


class ErrorKind(Enum):
    INVALID_AMOUNT = 'invalid_amount'
    LIMIT_EXCEEDED = 'limit_exceeded'
    DUPLICATE_OR_EMPTY_NAME = 'duplicate_or_empty_name'
    INVALID_LIMIT = 'invalid_limit'
    UNKNOWN_CATEGORY = 'unknown_category'
    IO_FAILURE = 'io_failure'


@dataclass(frozen=True)
class Result:
    """
    Outcome of a ledger, storage or export action.

    ok is False when the action was rejected and nothing changed. An ok
    result may still carry an error, e.g. INVALID_LIMIT when a category was
    created but its limit was not. message is ready to show to the user.
    """
    ok: bool
    error: Optional[ErrorKind] = None
    message: str = ""
    value: Any = None

    @classmethod
    def success(cls, message="", value=None, warning=None):
        return cls(True, warning, message, value)

    @classmethod
    def failure(cls, error, message):
        return cls(False, error, message)

    def __bool__(self):
        return self.ok


def normalize_kind(kind):
    """ Maps 'income'/'EXPENSE'/... onto INCOME or EXPENSE, or None. """
    if kind is None:
        return None
    k = str(kind).strip().lower()
    if k == 'income': return INCOME
    if k == 'expense': return EXPENSE
    return None


def _money_map(mapping):
    """ Copies a name -> amount mapping, converting amounts to cent Decimals. """
    result = {}
    for name, raw in (mapping or {}).items():
        value = parse_decimal(raw)
        if value is None:
            raise ValueError(f"Invalid amount for category '{name}': {raw!r}")
        result[name] = value
    return result


class Ledger:
    def __init__(self, income_categories=None, expense_categories=None, category_limits=None):
        self.income_categories = _money_map(income_categories)
        self.expense_categories = _money_map(expense_categories)
        # limits only make sense for expense categories that exist
        self.category_limits = {k: v for k, v in _money_map(category_limits).items() if k in self.expense_categories}
        self.budget = self.recompute_budget()
        self.display_log = []

    @classmethod
    def default(cls):
        """ Fresh ledger: one 'General' category on each side, budget zero. """
        return cls({DEFAULT_CATEGORY: ZERO}, {DEFAULT_CATEGORY: ZERO})

    # --- Totals ---
    def total_income(self):
        return sum(self.income_categories.values(), ZERO)

    def total_expense(self):
        return sum(self.expense_categories.values(), ZERO)

    def recompute_budget(self):
        return self.total_income() - self.total_expense()

    def categories(self, kind):
        """ The name -> total map for INCOME or EXPENSE. """
        k = normalize_kind(kind)
        if k is None:
            raise ValueError(f"Unknown category kind: {kind!r}")
        return self.income_categories if k == INCOME else self.expense_categories

    def remaining_for(self, category):
        """ Limit minus spent for an expense category, or None when unlimited. """
        limit = self.category_limits.get(category)
        if limit is None:
            return None
        return limit - self.expense_categories.get(category, ZERO)

    # --- Transactions ---
    def record_transaction(self, kind, category, amount):
        """
        Posts an income or expense amount to an existing category.
        On success the result value is the new budget.
        """
        k = normalize_kind(kind)
        if k is None:
            raise ValueError(f"Unknown transaction kind: {kind!r}")
        value = parse_amount(amount)
        if value is None:
            return Result.failure(ErrorKind.INVALID_AMOUNT, "Invalid amount. Please enter a valid number.")
        target = self.categories(k)
        if category not in target:
            return Result.failure(ErrorKind.UNKNOWN_CATEGORY, f"Unknown {k.lower()} category: {category}")

        if k == EXPENSE:
            limit = self.category_limits.get(category)
            if limit is not None and target[category] + value > limit:
                return Result.failure(ErrorKind.LIMIT_EXCEEDED, f"Expense exceeds the limit for category: {category}")

        target[category] += value
        self.budget += value if k == INCOME else -value
        self.display_log.append((k, category, value))
        return Result.success(f"{k} of {format_money(value)} added to '{category}'.", value=self.budget)

    def add_income(self, category, amount):
        return self.record_transaction(INCOME, category, amount)

    def add_expense(self, category, amount):
        return self.record_transaction(EXPENSE, category, amount)

    # --- Categories ---
    def add_category(self, kind, name, limit=None):
        """
        Adds a zero-total category. For expense categories a non-blank limit
        is recorded when it parses as a positive number; otherwise the
        category is kept and the result carries INVALID_LIMIT.
        """
        k = normalize_kind(kind)
        target = self.categories(k)
        cat_name = (name or "").strip()
        if not cat_name or cat_name in target:
            return Result.failure(ErrorKind.DUPLICATE_OR_EMPTY_NAME, "Category already exists or name is empty.")
        target[cat_name] = ZERO

        if k == EXPENSE and limit is not None and str(limit).strip():
            limit_value = parse_limit(limit)
            if limit_value is None:
                return Result.success(f"Category '{cat_name}' added without a limit. Invalid limit: please enter a positive number.",
                                      value=cat_name, warning=ErrorKind.INVALID_LIMIT)
            self.category_limits[cat_name] = limit_value
            return Result.success(f"Category '{cat_name}' added (limit {format_money(limit_value)}).", value=cat_name)
        return Result.success(f"Category '{cat_name}' added.", value=cat_name)

    # --- Reporting ---
    def summarize(self):
        lines = ["Category Summary:", "", "Income:"]
        for name, total in self.income_categories.items():
            lines.append(f"{name}: {format_money(total)}")
        lines += ["", "Expenses:"]
        for name, total in self.expense_categories.items():
            limit = self.category_limits.get(name)
            suffix = f" (limit {format_money(limit)})" if limit is not None else ""
            lines.append(f"{name}: {format_money(total)}{suffix}")
        return "\n".join(lines)

# utils.py
# Helper functions for amount parsing, money formatting and console input

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

CENTS = Decimal('0.01')
ZERO = Decimal('0.00')

def quantize(value):
    """ Rounds a Decimal to cents. """
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)

def parse_decimal(raw):
    """
    Converts user text (or a number) into a cent-rounded Decimal.
    Strips '$', ',' and surrounding whitespace. Returns None when the value
    is empty, unparsable, NaN or infinite.
    """
    if raw is None:
        return None
    if isinstance(raw, Decimal):
        value = raw
    else:
        # str() of a float keeps its shortest repr, so 0.1 stays 0.1
        value_str = str(raw).strip().replace('$', '').replace(',', '')
        if not value_str:
            return None
        try:
            value = Decimal(value_str)
        except InvalidOperation:
            return None
    if not value.is_finite():
        return None
    try:
        return quantize(value)
    except InvalidOperation: # too many digits for the context precision
        return None

def parse_amount(raw):
    """ Parses a transaction amount: finite and >= 0, else None. """
    value = parse_decimal(raw)
    if value is None or value < ZERO:
        return None
    return value

def parse_limit(raw):
    """ Parses a spending limit: finite and > 0, else None. """
    value = parse_decimal(raw)
    if value is None or value <= ZERO:
        return None
    return value

def format_money(value):
    """ '$1234.50' style string for a Decimal. """
    return f"${value:.2f}"

def get_string_input(prompt, allow_empty=False):
    """ Gets string input from the user. """
    while True:
        value = input(prompt).strip()
        if value or allow_empty:
            return value
        print("Input cannot be empty.")

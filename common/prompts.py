# -*- coding: utf-8 -*-
"""
================================================================================
Operator Prompts
================================================================================
Purpose:
----------------
Blocking console prompts shared by the customer, manager and supervisor tools.

Every question is asked with `ask()`, which keeps asking until the answer
passes its validator. A validator receives the raw answer and returns `True`
when it is acceptable, or an error message to print before asking again.
Validation failures therefore never leave this module.

`input_func` is injectable everywhere so that workflows can be driven from
tests without touching stdin.
----------------
"""

from decimal import Decimal, InvalidOperation


# =====================================================================================
# --- Parsing Helpers ---
# =====================================================================================

def parse_int(text):
    """
    Parses a whole number, accepting forms like '3' and '3.0'. Returns None otherwise.
    """
    text = str(text).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if value != value or value in (float('inf'), float('-inf')) or not value.is_integer():
        return None
    return int(value)


def parse_decimal(text):
    """Parses a finite decimal number. Returns None otherwise."""
    try:
        value = Decimal(str(text).strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


# =====================================================================================
# --- Validators ---
# =====================================================================================

def validate_product_id(max_id):
    """
    Builds a validator accepting whole numbers from 1 to `max_id` inclusive.
    """
    def validate(answer):
        value = parse_int(answer)
        if value is None:
            return f"That is not a valid number! Please choose a number between 1 - {max_id}."
        if value < 1 or value > max_id:
            return f"Choose a number between 1 - {max_id}."
        return True
    return validate


def validate_positive_int(answer):
    value = parse_int(answer)
    if value is None:
        return "That is not a valid quantity! Please choose a number greater than 0."
    if value <= 0:
        return "Choose a number greater than 0."
    return True


def validate_price(answer):
    value = parse_decimal(answer)
    if value is None or value <= 0:
        return "Please enter a valid number greater than 0."
    return True


def validate_non_negative_amount(answer):
    value = parse_decimal(answer)
    if value is None or value < 0:
        return "Please enter a valid number of 0 or more."
    return True


def validate_non_empty(answer):
    if not str(answer).strip():
        return "This field cannot be empty."
    return True


# =====================================================================================
# --- Prompts ---
# =====================================================================================

def ask(message, validate=None, input_func=None):
    """
    Asks a single question until the answer passes `validate`.

    Returns:
        str: The accepted answer, stripped of surrounding whitespace.
    """
    input_func = input_func or input
    while True:
        answer = input_func(f"{message} ").strip()
        if validate is None:
            return answer
        result = validate(answer)
        if result is True:
            return answer
        print(f"\n{result}")


def ask_int(message, validate, input_func=None):
    """Asks a question whose validated answer is a whole number."""
    return parse_int(ask(message, validate, input_func))


def ask_decimal(message, validate, input_func=None):
    """Asks a question whose validated answer is a decimal amount."""
    return parse_decimal(ask(message, validate, input_func))


def confirm(message, default=True, input_func=None):
    """
    Asks a yes/no question. An empty answer returns `default`.
    """
    input_func = input_func or input
    suffix = "(Y/n)" if default else "(y/N)"
    while True:
        answer = input_func(f"{message} {suffix} ").strip().lower()
        if not answer:
            return default
        if answer in ('y', 'yes'):
            return True
        if answer in ('n', 'no'):
            return False
        print("\nPlease answer yes or no.")


def choose(message, choices, input_func=None):
    """
    Shows a numbered menu and returns the chosen item.

    `choices` may be any sequence whose items have a `value` attribute (such as
    Enum members) or are plain strings. The operator may answer with the number
    or the full label.
    """
    input_func = input_func or input
    choices = list(choices)
    labels = [getattr(choice, 'value', choice) for choice in choices]
    while True:
        print(message)
        for position, label in enumerate(labels, start=1):
            print(f"  {position}. {label}")
        answer = input_func("> ").strip()
        position = parse_int(answer)
        if position is not None and 1 <= position <= len(choices):
            return choices[position - 1]
        for choice, label in zip(choices, labels):
            if answer.lower() == str(label).lower():
                return choice
        print(f"\nPlease choose a number between 1 - {len(choices)}.")

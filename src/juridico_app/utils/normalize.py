"""Parsing helpers for Brazilian-formatted input (dd/mm/aaaa, 5.000,50)."""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

BR_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


def parse_br_date(value) -> date | None:
    """
    Parse "dd/mm/aaaa" or ISO strings into a date.

    Returns None for empty or unparseable input. date/datetime pass through.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    match = BR_DATE_RE.match(text)
    try:
        if match:
            day, month, year = (int(part) for part in match.groups())
            return date(year, month, day)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def parse_br_money(value) -> Decimal | None:
    """Parse "5.000,50" (or plain numbers) into a Decimal."""
    if value is None or value == "":
        return None
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))

    text = str(value).strip().replace("R$", "").strip()
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def coerce_br_date(value):
    """
    Pre-validation hook for date fields.

    Blank strings become None and "dd/mm/aaaa" strings become dates. An
    impossible date such as "31/02/2026" is returned unchanged so the model
    rejects it instead of storing null.
    """
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return None
        if BR_DATE_RE.match(text):
            parsed = parse_br_date(text)
            return parsed if parsed is not None else value
    return value

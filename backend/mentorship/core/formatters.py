"""Display Formatters — currency, Caribbean dates, file sizes and short text.

Invariants:
    - All functions are pure and never raise on bad input; they return a
      documented fallback string instead
    - Currency is Eastern Caribbean Dollar, rendered "EC$1,234.50"
    - Display dates are dd/mm/yyyy; HTML input dates are yyyy-mm-dd
"""

import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

CURRENCY_PREFIX = "EC$"
NOT_AVAILABLE = "N/A"
INVALID_DATE = "Invalid Date"
FILE_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def parse_number(value: Any) -> float:
    """Leniently parse a number; 0.0 when unparseable."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def format_number(value: Any, decimals: int = 2) -> str:
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return "0"
    if not number.is_finite():
        return "0"
    quantum = Decimal(1).scaleb(-decimals)
    return str(number.quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: Any) -> str:
    try:
        number = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        return f"{CURRENCY_PREFIX}0.00"
    if not number.is_finite():
        return f"{CURRENCY_PREFIX}0.00"
    rounded = number.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_PREFIX}{abs(rounded):,.2f}"


def _to_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def format_date(value: Any) -> str:
    if not value:
        return NOT_AVAILABLE
    parsed = _to_datetime(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime("%d/%m/%Y")


def format_datetime(value: Any) -> str:
    if not value:
        return NOT_AVAILABLE
    parsed = _to_datetime(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime("%d/%m/%Y, %H:%M")


def format_date_for_input(value: Any) -> str:
    if not value:
        return ""
    parsed = _to_datetime(value)
    return parsed.strftime("%Y-%m-%d") if parsed else ""


def input_date_to_display(input_date: Any) -> str:
    """'2024-03-05' -> '05/03/2024'."""
    if not isinstance(input_date, str) or not input_date:
        return ""
    parts = input_date.split("-")
    if len(parts) < 3 or not all(parts[:3]):
        return ""
    year, month, day = parts[:3]
    return f"{day}/{month}/{year}"


def display_date_to_input(display_date: Any) -> str:
    """'5/3/2024' -> '2024-03-05'."""
    if not isinstance(display_date, str) or not display_date:
        return ""
    parts = display_date.split("/")
    if len(parts) < 3 or not all(parts[:3]):
        return ""
    day, month, year = parts[:3]
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def format_file_size(size_bytes: Any) -> str:
    """Binary units, two decimals with trailing zeros dropped: 1536 -> '1.5 KB'."""
    if isinstance(size_bytes, bool) or not isinstance(size_bytes, (int, float)):
        return "0 Bytes"
    if size_bytes <= 0:
        return "0 Bytes"
    scaled = float(size_bytes)
    index = 0
    while scaled >= 1024 and index < len(FILE_SIZE_UNITS) - 1:
        scaled /= 1024
        index += 1
    scaled = round(scaled, 2)
    text = f"{scaled:.2f}".rstrip("0").rstrip(".")
    return f"{text} {FILE_SIZE_UNITS[index]}"


def truncate_text(text: Any, max_length: int = 50) -> str:
    if not text:
        return ""
    text = str(text)
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def capitalize_first(value: Any) -> str:
    if not value:
        return ""
    value = str(value)
    return value[0].upper() + value[1:]

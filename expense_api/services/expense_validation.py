"""Field-level expense validation.

`validate_expense` checks an untrusted request body and returns every
violation it finds (it never stops at the first one). An empty list means
the payload may be handed to the record builder.

Required fields follow "falsy equals absent": an empty string, ``0`` or
``null`` is reported exactly like a missing key. Types are checked, not
coerced, so ``"150.50"`` is not an acceptable amount.
"""

from __future__ import annotations

import math
from typing import Any, List, Mapping

from expense_api.models.expense import FieldError
from expense_api.services.timestamps import parse_timestamp

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

MSG_TITLE = f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
MSG_AMOUNT = "Amount must be a positive number"
MSG_CATEGORY = "Category is required"
MSG_DATE = "Valid date is required"
MSG_DESCRIPTION_LENGTH = f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
MSG_DESCRIPTION_TYPE = "Description must be text"


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not an amount
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _valid_title(value: Any) -> bool:
    return (
        isinstance(value, str)
        and TITLE_MIN_LENGTH <= len(value) <= TITLE_MAX_LENGTH
    )


def _valid_amount(value: Any) -> bool:
    if not _is_number(value):
        return False
    try:
        as_float = float(value)
    except OverflowError:
        return False
    return math.isfinite(as_float) and as_float > 0


def _valid_date(value: Any) -> bool:
    return bool(value) and isinstance(value, str) and parse_timestamp(value) is not None


def validate_expense(data: Mapping[str, Any]) -> List[FieldError]:
    errors: List[FieldError] = []

    if not _valid_title(data.get("title")):
        errors.append(FieldError(field="title", message=MSG_TITLE))

    if not _valid_amount(data.get("amount")):
        errors.append(FieldError(field="amount", message=MSG_AMOUNT))

    category = data.get("category")
    if not category or not isinstance(category, str):
        errors.append(FieldError(field="category", message=MSG_CATEGORY))

    if not _valid_date(data.get("date")):
        errors.append(FieldError(field="date", message=MSG_DATE))

    description = data.get("description")
    if description is not None:
        if not isinstance(description, str):
            errors.append(FieldError(field="description", message=MSG_DESCRIPTION_TYPE))
        elif len(description) > DESCRIPTION_MAX_LENGTH:
            errors.append(FieldError(field="description", message=MSG_DESCRIPTION_LENGTH))

    return errors

"""Turn a validated payload into a stored `Expense` record."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from expense_api.models.expense import Expense, ExpenseIn
from expense_api.services.ids import IdGenerator, uuid4_id
from expense_api.services.timestamps import format_timestamp, parse_timestamp, utc_now

Clock = Callable[[], datetime]


def build_expense(
    data: Mapping[str, Any],
    id_generator: Optional[IdGenerator] = None,
    clock: Optional[Clock] = None,
) -> Expense:
    """Build a record from input that already passed `validate_expense`.

    The id comes from ``id_generator``; ``date`` is normalized to the
    canonical UTC timestamp; ``createdAt`` and ``updatedAt`` share the same
    instant read once from ``clock``.
    """
    payload = ExpenseIn.model_validate(dict(data))
    parsed_date = parse_timestamp(payload.date)
    if parsed_date is None:
        raise ValueError(f"unparseable date {payload.date!r}")

    now = format_timestamp((clock or utc_now)())
    return Expense(
        id=(id_generator or uuid4_id)(),
        **payload.model_dump(exclude={"date"}),
        date=format_timestamp(parsed_date),
        created_at=now,
        updated_at=now,
    )

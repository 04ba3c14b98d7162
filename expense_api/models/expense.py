from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class FieldError(BaseModel):
    """One validation violation, reported as ``{field, message}``."""

    field: str
    message: str


class ExpenseIn(BaseModel):
    """Expense payload after it has passed ``validate_expense``.

    Unknown keys in the submitted body are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    amount: Union[StrictInt, StrictFloat]
    category: str
    date: str
    description: Optional[str] = None


class Expense(ExpenseIn):
    """Stored expense record; serialized with camelCase timestamps."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")

    def to_public(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

"""Pydantic models for expense records and response envelopes."""

from .expense import Expense, ExpenseIn, FieldError
from .envelope import ErrorBody, ErrorEnvelope, SuccessEnvelope, error_envelope, success_envelope

__all__ = [
    "Expense",
    "ExpenseIn",
    "FieldError",
    "ErrorBody",
    "ErrorEnvelope",
    "SuccessEnvelope",
    "error_envelope",
    "success_envelope",
]

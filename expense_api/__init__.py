"""Expense Tracker API: in-memory expense creation service."""

__version__ = "0.1.0"

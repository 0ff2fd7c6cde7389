"""Enumerations shared by entry models and services."""

from __future__ import annotations

from enum import Enum


class EntryType(str, Enum):
    """Whether an entry brings money in or takes it out."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class EntryStatus(str, Enum):
    PENDING = "PENDING"
    SETTLED = "SETTLED"
    CANCELLED = "CANCELLED"

"""
Group Expense Settlement Engine

This module provides:
- Net balance aggregation from expense and split records
- Greedy debtor/creditor matching into a short list of transfers
- Equal split construction that never loses a cent
- Per-member views of a settle-up plan
"""

from .config import SettlementConfig
from .errors import SettlementError, UnknownMemberError, InvalidSplitError
from .models import (
    Member,
    Split,
    Expense,
    ExpenseCategory,
    Balance,
    BalanceStatus,
    Settlement,
    SettlementPlan,
    MemberSummary,
    UnknownMemberPolicy,
)
from .service import SettlementService
from .splits import split_equally

__all__ = [
    "SettlementConfig",
    "SettlementError",
    "UnknownMemberError",
    "InvalidSplitError",
    "Member",
    "Split",
    "Expense",
    "ExpenseCategory",
    "Balance",
    "BalanceStatus",
    "Settlement",
    "SettlementPlan",
    "MemberSummary",
    "UnknownMemberPolicy",
    "SettlementService",
    "split_equally",
]

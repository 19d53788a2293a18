"""Account domain models."""

from console_bank.models.account import (
    CURRENT_OVERDRAFT_LIMIT,
    MAX_AMOUNT,
    SAVINGS_INTEREST_RATE,
    Account,
    to_amount,
    to_decimal,
)
from console_bank.models.enums import AccountKind

__all__ = [
    "CURRENT_OVERDRAFT_LIMIT",
    "MAX_AMOUNT",
    "SAVINGS_INTEREST_RATE",
    "Account",
    "AccountKind",
    "to_amount",
    "to_decimal",
]

"""Enumeration types for account entities."""

from enum import Enum

from console_bank.exceptions import InvalidAccountTypeError


class AccountKind(str, Enum):
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"

    @classmethod
    def parse(cls, text: "str | AccountKind") -> "AccountKind":
        """Map user input such as ``"Savings"`` or ``" current "`` to a kind."""
        if isinstance(text, cls):
            return text
        try:
            return cls(str(text).strip().upper())
        except ValueError:
            raise InvalidAccountTypeError(f"Invalid account type: {text!r}") from None

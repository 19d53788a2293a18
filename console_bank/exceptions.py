"""Custom exception hierarchy for console-bank."""


class BankError(Exception):
    """Base exception for all console-bank errors."""


class AccountNotFoundError(BankError):
    """Raised when an account number is not in the registry."""


class DuplicateAccountError(BankError):
    """Raised when an account number is already registered."""


class InvalidAccountTypeError(BankError, ValueError):
    """Raised when an account type is neither savings nor current."""


class SessionClosedError(BankError):
    """Raised when a logged-out session is used."""


class PersistenceError(BankError):
    """Raised when persisted account data cannot be decoded."""


class ConfigurationError(BankError):
    """Raised when configuration is invalid or missing."""

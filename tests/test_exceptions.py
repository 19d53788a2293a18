"""Tests for custom exception hierarchy."""

from console_bank.exceptions import (
    AccountNotFoundError,
    BankError,
    ConfigurationError,
    DuplicateAccountError,
    InvalidAccountTypeError,
    PersistenceError,
    SessionClosedError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_bank_error_is_exception(self) -> None:
        assert isinstance(BankError("test"), Exception)

    def test_account_not_found_is_bank_error(self) -> None:
        assert isinstance(AccountNotFoundError("test"), BankError)

    def test_duplicate_account_is_bank_error(self) -> None:
        assert isinstance(DuplicateAccountError("test"), BankError)

    def test_invalid_account_type_is_value_error(self) -> None:
        err = InvalidAccountTypeError("test")
        assert isinstance(err, BankError)
        assert isinstance(err, ValueError)

    def test_session_closed_is_bank_error(self) -> None:
        assert isinstance(SessionClosedError("test"), BankError)

    def test_persistence_error_is_bank_error(self) -> None:
        assert isinstance(PersistenceError("test"), BankError)

    def test_configuration_error_is_bank_error(self) -> None:
        assert isinstance(ConfigurationError("test"), BankError)

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("Account abc123 not found")
        assert str(err) == "Account abc123 not found"

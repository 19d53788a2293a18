"""Versioned record schema for persisted accounts."""

from decimal import Decimal
from enum import Enum
from typing import Any

from console_bank.exceptions import BankError, PersistenceError
from console_bank.models import Account, AccountKind, to_decimal
from console_bank.store import AccountRegistry

SCHEMA_VERSION = 1

ACCOUNT_FIELDS = ("account_number", "holder_name", "kind", "balance")


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    return value


def account_to_record(account: Account) -> dict[str, Any]:
    """Convert an account to a flat record, field by field."""
    return {name: serialize_value(getattr(account, name)) for name in ACCOUNT_FIELDS}


def account_from_record(record: Any) -> Account:
    """Rebuild an account from a record.

    Raises
    ------
    PersistenceError
        If the record is missing fields, holds invalid values, or has a
        balance below the floor its kind allows.
    """
    if not isinstance(record, dict):
        raise PersistenceError(f"Account record must be an object, got {type(record).__name__}")

    missing = [name for name in ACCOUNT_FIELDS if name not in record]
    if missing:
        raise PersistenceError(f"Account record missing fields: {', '.join(missing)}")

    account_number = record["account_number"]
    holder_name = record["holder_name"]
    if not isinstance(account_number, str) or not account_number:
        raise PersistenceError(f"Invalid account number: {account_number!r}")
    if not isinstance(holder_name, str):
        raise PersistenceError(f"Invalid holder name for account {account_number}")

    try:
        kind = AccountKind.parse(record["kind"])
        balance = to_decimal(record["balance"])
    except (BankError, ValueError) as e:
        raise PersistenceError(f"Invalid record for account {account_number}: {e}") from e

    account = Account(
        account_number=account_number,
        holder_name=holder_name,
        kind=kind,
        balance=balance,
    )
    if account.balance < -account.overdraft_limit:
        raise PersistenceError(
            f"Balance {account.balance} of {kind.value} account {account_number} "
            f"is below its floor of {-account.overdraft_limit}"
        )
    return account


def registry_to_document(registry: AccountRegistry) -> dict[str, Any]:
    """Convert the whole registry to a versioned document."""
    return {
        "schema_version": SCHEMA_VERSION,
        "accounts": [account_to_record(account) for account in registry],
    }


def registry_from_document(document: Any) -> AccountRegistry:
    """Rebuild a registry from a versioned document.

    Raises
    ------
    PersistenceError
        If the document has an unsupported version or invalid accounts.
    """
    if not isinstance(document, dict):
        raise PersistenceError("Account file must hold a JSON object")

    version = document.get("schema_version")
    if version != SCHEMA_VERSION:
        raise PersistenceError(f"Unsupported schema version: {version!r}")

    records = document.get("accounts")
    if not isinstance(records, list):
        raise PersistenceError("Account file has no account list")

    registry = AccountRegistry()
    for record in records:
        account = account_from_record(record)
        try:
            registry.add(account)
        except BankError as e:
            raise PersistenceError(str(e)) from e
    return registry

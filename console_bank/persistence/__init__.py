"""Persistence of the account registry to a local file."""

from console_bank.persistence.json_file import JsonAccountStore
from console_bank.persistence.serialization import (
    SCHEMA_VERSION,
    account_from_record,
    account_to_record,
    registry_from_document,
    registry_to_document,
)

__all__ = [
    "SCHEMA_VERSION",
    "JsonAccountStore",
    "account_from_record",
    "account_to_record",
    "registry_from_document",
    "registry_to_document",
]

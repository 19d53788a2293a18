"""In-memory account registry."""

from console_bank.store.registry import AccountRegistry

__all__ = ["AccountRegistry"]

"""Configuration management for console-bank."""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from console_bank.exceptions import ConfigurationError

DEFAULT_DATA_FILE = Path("accounts.json")
LOG_FORMATS = ("standard", "json")


@dataclass
class StorageConfig:
    """Where and how the account registry is persisted."""

    data_file: Path = field(default_factory=lambda: DEFAULT_DATA_FILE)
    pretty_json: bool = True


@dataclass
class DisplayConfig:
    """Console display settings."""

    currency_symbol: str = "₹"

    def format_amount(self, amount: Decimal) -> str:
        """Render an amount with the currency symbol."""
        return f"{self.currency_symbol}{amount}"


@dataclass
class BankConfig:
    """Main configuration for console-bank."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables.

        Only the logging knobs are read; the data file is a fixed path.
        """
        import os

        return cls(
            log_level=os.getenv("BANK_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("BANK_LOG_FORMAT", "standard"),
        )

"""Session controller: login and dashboard operations over the registry."""

from dataclasses import dataclass, field
from decimal import Decimal

from console_bank.config import BankConfig
from console_bank.exceptions import SessionClosedError
from console_bank.logging import get_logger
from console_bank.models import Account, AccountKind, to_amount
from console_bank.persistence import JsonAccountStore
from console_bank.store import AccountRegistry

logger = get_logger(__name__)


@dataclass
class BankApp:
    """Application state shared by the console and its sessions."""

    registry: AccountRegistry
    store: JsonAccountStore
    config: BankConfig = field(default_factory=BankConfig)

    @classmethod
    def open(cls, config: BankConfig | None = None) -> "BankApp":
        """Build the store from config and load the persisted registry."""
        config = config or BankConfig()
        store = JsonAccountStore(config.storage.data_file, pretty=config.storage.pretty_json)
        return cls(registry=store.load(), store=store, config=config)

    def save(self) -> bool:
        return self.store.save(self.registry)

    def create_account(self, holder_name: str, kind: AccountKind | str) -> str:
        """Open an account and persist the registry.

        Raises
        ------
        InvalidAccountTypeError
            If ``kind`` is neither savings nor current. Nothing is saved.
        """
        account_number = self.registry.create(holder_name, kind)
        self.save()
        return account_number

    def login(self, account_number: str) -> "Session | None":
        account = self.registry.lookup(account_number)
        if account is None:
            logger.info("Login failed, account %s not found", account_number.strip())
            return None
        logger.info(
            "Logged in to account %s",
            account.account_number,
            extra={"account_number": account.account_number},
        )
        return Session(app=self, account=account)

    def shutdown(self) -> bool:
        """Final save before the process exits."""
        return self.save()


class Session:
    """Dashboard operations for one logged-in account.

    Every mutating call saves the whole registry before returning.
    """

    def __init__(self, app: BankApp, account: Account) -> None:
        self.app = app
        self._account: Account | None = account

    @property
    def active(self) -> bool:
        return self._account is not None

    @property
    def account(self) -> Account:
        if self._account is None:
            raise SessionClosedError("Session has been logged out")
        return self._account

    @property
    def account_number(self) -> str:
        return self.account.account_number

    def view_details(self) -> str:
        return self.account.get_details(self.app.config.display.format_amount)

    def deposit(self, amount: Decimal | int | float | str) -> bool:
        """Deposit into the account.

        Returns
        -------
        bool
            False when the amount was non-positive and ignored.
        """
        account = self.account
        amount = to_amount(amount)
        account.deposit(amount)
        applied = amount > 0
        if applied:
            logger.info(
                "Deposited %s into %s",
                amount,
                account.account_number,
                extra={"account_number": account.account_number},
            )
        self.app.save()
        return applied

    def withdraw(self, amount: Decimal | int | float | str) -> bool:
        account = self.account
        succeeded = account.withdraw(amount)
        message = "Withdrew %s from %s" if succeeded else "Withdrawal of %s from %s refused"
        logger.info(
            message,
            amount,
            account.account_number,
            extra={"account_number": account.account_number},
        )
        self.app.save()
        return succeeded

    def interest(self) -> Decimal:
        return self.account.calculate_interest()

    def logout(self) -> None:
        if self._account is not None:
            logger.info("Logged out of account %s", self._account.account_number)
        self._account = None

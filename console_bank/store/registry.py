"""Account registry keyed by account number."""

import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterator

from console_bank.exceptions import AccountNotFoundError, BankError, DuplicateAccountError
from console_bank.logging import get_logger
from console_bank.models import Account, AccountKind

logger = get_logger(__name__)

ACCOUNT_NUMBER_LENGTH = 6
MAX_NUMBER_ATTEMPTS = 100


def new_account_number() -> str:
    """Return a 6-character token from the start of a random UUID."""
    return str(uuid.uuid4())[:ACCOUNT_NUMBER_LENGTH]


@dataclass
class AccountRegistry:
    """In-memory source of truth for all accounts.

    The registry owns every ``Account``; callers reach accounts through
    ``lookup``/``get`` and never construct registered accounts themselves.
    """

    accounts: dict[str, Account] = field(default_factory=dict)
    number_factory: Callable[[], str] = field(default=new_account_number, repr=False, compare=False)

    def create(self, holder_name: str, kind: AccountKind | str) -> str:
        """Open a zero-balance account and return its number.

        Raises
        ------
        InvalidAccountTypeError
            If ``kind`` is neither savings nor current.
        BankError
            If no free account number was found.
        """
        kind = AccountKind.parse(kind)
        account_number = self._unused_number()
        self.accounts[account_number] = Account(
            account_number=account_number,
            holder_name=holder_name,
            kind=kind,
        )
        logger.info("Created %s account %s", kind.value, account_number)
        return account_number

    def add(self, account: Account) -> None:
        """Register an existing account (used when restoring from disk)."""
        if account.account_number in self.accounts:
            raise DuplicateAccountError(f"Account {account.account_number} already exists")
        self.accounts[account.account_number] = account

    def lookup(self, account_number: str) -> Account | None:
        return self.accounts.get(account_number.strip())

    def get(self, account_number: str) -> Account:
        account = self.lookup(account_number)
        if account is None:
            raise AccountNotFoundError(f"Account {account_number} not found")
        return account

    def summary(self) -> dict[str, int]:
        """Return account counts per kind."""
        counts = {kind.value: 0 for kind in AccountKind}
        for account in self.accounts.values():
            counts[account.kind.value] += 1
        return counts

    def _unused_number(self) -> str:
        for _ in range(MAX_NUMBER_ATTEMPTS):
            candidate = self.number_factory()
            if candidate not in self.accounts:
                return candidate
            logger.debug("Account number %s already taken, regenerating", candidate)
        raise BankError(f"Could not allocate an account number after {MAX_NUMBER_ATTEMPTS} attempts")

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        if not isinstance(account_number, str):
            return False
        return self.lookup(account_number) is not None

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts.values())

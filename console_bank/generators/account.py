"""Demo account generator."""

from decimal import Decimal

from console_bank.generators.base import BaseGenerator
from console_bank.logging import get_logger
from console_bank.models import Account, AccountKind
from console_bank.store import AccountRegistry

logger = get_logger(__name__)


class DemoAccountGenerator(BaseGenerator):
    """Open synthetic accounts with Faker holder names.

    Roughly 70% savings, 30% current. Opening deposits are whole rupees
    between 500 and 50 000. A quarter of current accounts then withdraw 90%
    of their available funds, which usually leaves them overdrawn.
    """

    ACCOUNT_KINDS = list(AccountKind)
    ACCOUNT_KIND_WEIGHTS = [0.70, 0.30]

    def pick_kind(self) -> AccountKind:
        return self.rng.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]

    def opening_deposit(self) -> Decimal:
        return Decimal(self.rng.randint(500, 50_000))

    def populate(self, registry: AccountRegistry, count: int) -> list[Account]:
        """Create ``count`` accounts through the registry and fund them.

        Parameters
        ----------
        registry : AccountRegistry
            Registry that assigns account numbers and owns the accounts.
        count : int
            Number of accounts to open.

        Returns
        -------
        list[Account]
            The accounts created, in creation order.
        """
        created = []
        for _ in range(count):
            kind = self.pick_kind()
            account = registry.get(registry.create(self.fake.name(), kind))
            account.deposit(self.opening_deposit())
            if kind == AccountKind.CURRENT and self.rng.random() < 0.25:
                account.withdraw(account.available_funds * Decimal("0.9"))
            created.append(account)
        logger.info("Generated %d demo accounts", count)
        return created

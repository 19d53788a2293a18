"""Account model with savings and current variants."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Callable

from console_bank.models.enums import AccountKind

SAVINGS_INTEREST_RATE = Decimal("0.04")
CURRENT_OVERDRAFT_LIMIT = Decimal("5000")

_ZERO = Decimal("0")

# Largest magnitude accepted for a single deposit or withdrawal
MAX_AMOUNT = Decimal("1000000000000000")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a monetary value to Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.

    Raises
    ------
    ValueError
        If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a valid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Not a valid amount: {value!r}")
    return amount


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Coerce a transaction amount, rejecting magnitudes above ``MAX_AMOUNT``.

    Raises
    ------
    ValueError
        If the value is not a finite number or is out of range.
    """
    amount = to_decimal(value)
    if amount.copy_abs() > MAX_AMOUNT:
        raise ValueError(f"Amount out of range: {value!r}")
    return amount


@dataclass
class Account:
    """Bank account entity.

    Account kinds:
    - SAVINGS: no overdraft, earns 4% interest on the current balance
    - CURRENT: overdraft down to -5000, earns no interest
    """

    account_number: str
    holder_name: str
    kind: AccountKind
    balance: Decimal = field(default_factory=lambda: Decimal("0"))

    def __post_init__(self) -> None:
        self.kind = AccountKind.parse(self.kind)
        self.balance = to_decimal(self.balance)

    @property
    def overdraft_limit(self) -> Decimal:
        match self.kind:
            case AccountKind.CURRENT:
                return CURRENT_OVERDRAFT_LIMIT
            case _:
                return _ZERO

    @property
    def available_funds(self) -> Decimal:
        """Largest amount a single withdrawal may take."""
        return self.balance + self.overdraft_limit

    def deposit(self, amount: Decimal | int | float | str) -> None:
        """Add ``amount`` to the balance; non-positive amounts are ignored."""
        amount = to_amount(amount)
        if amount > 0:
            self.balance += amount

    def withdraw(self, amount: Decimal | int | float | str) -> bool:
        """Take ``amount`` from the balance if the account kind allows it.

        Returns
        -------
        bool
            True when the balance was debited, False for insufficient funds
            or a non-positive amount. The balance is untouched on False.
        """
        amount = to_amount(amount)
        if amount <= 0:
            return False

        match self.kind:
            case AccountKind.SAVINGS:
                allowed = amount <= self.balance
            case AccountKind.CURRENT:
                allowed = amount <= self.balance + CURRENT_OVERDRAFT_LIMIT

        if allowed:
            self.balance -= amount
        return allowed

    def calculate_interest(self) -> Decimal:
        """Interest earned on the current balance."""
        match self.kind:
            case AccountKind.SAVINGS:
                return self.balance * SAVINGS_INTEREST_RATE
            case AccountKind.CURRENT:
                return _ZERO

    def get_details(self, format_amount: Callable[[Decimal], str] = str) -> str:
        """Three-line snapshot; ``format_amount`` renders the balance."""
        return (
            f"Account No: {self.account_number}\n"
            f"Name: {self.holder_name}\n"
            f"Balance: {format_amount(self.balance)}"
        )

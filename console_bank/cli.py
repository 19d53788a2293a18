"""Interactive console menu for console-bank."""

from decimal import Decimal
from typing import Callable

from console_bank.config import BankConfig
from console_bank.exceptions import InvalidAccountTypeError
from console_bank.logging import get_logger, setup_logging
from console_bank.models import to_amount
from console_bank.session import BankApp, Session

logger = get_logger(__name__)

MAIN_MENU = (
    "\n=== Welcome to Console Bank System ===",
    "1. Create Account",
    "2. Login",
    "3. Exit",
)

DASHBOARD_MENU = (
    "\n--- Dashboard ---",
    "1. View Account Details",
    "2. Deposit",
    "3. Withdraw",
    "4. Calculate Interest",
    "5. Logout",
)


class BankConsole:
    """Menu loop that reads choices and reports results.

    Parameters
    ----------
    app : BankApp
        Loaded application state.
    input_fn : Callable[[str], str]
        Prompt reader, ``input`` by default.
    output_fn : Callable[[str], None]
        Line writer, ``print`` by default.
    """

    def __init__(
        self,
        app: BankApp,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.app = app
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def run(self) -> None:
        """Loop over the main menu until the user exits or input ends."""
        if self.app.store.last_error:
            self.output_fn("Error loading accounts.")

        while True:
            for line in MAIN_MENU:
                self.output_fn(line)
            try:
                choice = self.input_fn("Enter choice: ").strip()
            except EOFError:
                choice = "3"

            try:
                if choice == "1":
                    self.create_account()
                elif choice == "2":
                    self.login()
            except EOFError:
                choice = "3"

            if choice in ("1", "2"):
                continue
            elif choice == "3":
                self.app.shutdown()
                self._report_save()
                self.output_fn("Thank you for using our system.")
                return
            else:
                self.output_fn("Invalid choice.")

    def create_account(self) -> None:
        name = self.input_fn("Enter Name: ").strip()
        kind = self.input_fn("Account Type (Savings/Current): ")
        try:
            account_number = self.app.create_account(name, kind)
        except InvalidAccountTypeError:
            self.output_fn("Invalid account type.")
            return
        self._report_save()
        self.output_fn("Account created successfully!")
        self.output_fn(f"Your Account Number: {account_number}")

    def login(self) -> None:
        account_number = self.input_fn("Enter Account Number: ")
        session = self.app.login(account_number)
        if session is None:
            self.output_fn("Account not found.")
            return
        self.dashboard(session)

    def dashboard(self, session: Session) -> None:
        """Loop over the dashboard menu until logout."""
        display = self.app.config.display
        while session.active:
            for line in DASHBOARD_MENU:
                self.output_fn(line)
            try:
                choice = self.input_fn("Enter choice: ").strip()
            except EOFError:
                choice = "5"

            if choice == "1":
                self.output_fn(session.view_details())
            elif choice == "2":
                amount = self._read_amount("Enter amount to deposit: ")
                if amount is None:
                    continue
                if session.deposit(amount):
                    self.output_fn("Amount Deposited.")
                else:
                    self.output_fn("Amount must be positive.")
                self._report_save()
            elif choice == "3":
                amount = self._read_amount("Enter amount to withdraw: ")
                if amount is None:
                    continue
                if amount <= 0:
                    self.output_fn("Amount must be positive.")
                    continue
                if session.withdraw(amount):
                    self.output_fn("Amount Withdrawn.")
                else:
                    self.output_fn("Insufficient funds.")
                self._report_save()
            elif choice == "4":
                self.output_fn(f"Interest: {display.format_amount(session.interest())}")
            elif choice == "5":
                session.logout()
            else:
                self.output_fn("Invalid option.")

    def _read_amount(self, prompt: str) -> Decimal | None:
        raw = self.input_fn(prompt)
        try:
            return to_amount(raw)
        except ValueError:
            self.output_fn("Invalid amount.")
            return None

    def _report_save(self) -> None:
        if self.app.store.last_error is not None:
            self.output_fn("Error saving accounts.")


def main() -> None:
    """Entry point for the ``console-bank`` command."""
    config = BankConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)
    app = BankApp.open(config)
    logger.info("Console bank started with %d accounts", len(app.registry))
    try:
        BankConsole(app).run()
    except KeyboardInterrupt:
        app.shutdown()
        print()

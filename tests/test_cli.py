"""Tests for the console menu."""

from decimal import Decimal
from typing import Callable
from unittest.mock import patch

import pytest

from console_bank.config import BankConfig
from console_bank.session import BankApp
from console_bank.cli import BankConsole, main


def scripted(answers: list[str]) -> Callable[[str], str]:
    """Return an input function that replays answers, then raises EOFError."""
    remaining = iter(answers)

    def read(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def run_console(app: BankApp, answers: list[str]) -> list[str]:
    lines: list[str] = []
    BankConsole(app, input_fn=scripted(answers), output_fn=lines.append).run()
    return lines


class TestMainMenu:
    """Tests for the top-level menu."""

    def test_exit(self, app: BankApp, config: BankConfig) -> None:
        lines = run_console(app, ["3"])

        assert "1. Create Account" in lines
        assert lines[-1] == "Thank you for using our system."
        assert config.storage.data_file.exists()

    def test_eof_exits(self, app: BankApp) -> None:
        lines = run_console(app, [])
        assert lines[-1] == "Thank you for using our system."

    def test_invalid_choice(self, app: BankApp) -> None:
        lines = run_console(app, ["9", "abc", "3"])
        assert lines.count("Invalid choice.") == 2

    def test_create_account(self, app: BankApp) -> None:
        lines = run_console(app, ["1", "Asha Rao", "Savings", "3"])

        assert "Account created successfully!" in lines
        (account,) = list(app.registry)
        assert f"Your Account Number: {account.account_number}" in lines
        assert account.holder_name == "Asha Rao"

    def test_create_invalid_type(self, app: BankApp) -> None:
        lines = run_console(app, ["1", "Asha", "Fixed", "3"])

        assert "Invalid account type." in lines
        assert len(app.registry) == 0

    def test_login_not_found(self, app: BankApp) -> None:
        lines = run_console(app, ["2", "nope00", "3"])

        assert "Account not found." in lines
        assert "\n--- Dashboard ---" not in lines

    def test_reports_load_error(self, config: BankConfig) -> None:
        config.storage.data_file.write_text("{broken", encoding="utf-8")
        app = BankApp.open(config)

        lines = run_console(app, ["3"])

        assert lines[0] == "Error loading accounts."

    def test_reports_save_error(self, app: BankApp) -> None:
        with patch("builtins.open", side_effect=OSError("disk full")):
            lines = run_console(app, ["1", "Asha", "current", "3"])

        assert "Error saving accounts." in lines
        assert len(app.registry) == 1


class TestDashboard:
    """Tests for the dashboard menu."""

    @pytest.fixture
    def number(self, app: BankApp) -> str:
        return app.create_account("Asha Rao", "savings")

    def test_savings_walkthrough(self, app: BankApp, number: str) -> None:
        lines = run_console(
            app,
            ["2", number, "2", "1000", "3", "1200", "3", "400", "4", "1", "5", "3"],
        )

        assert "Amount Deposited." in lines
        assert "Insufficient funds." in lines
        assert "Amount Withdrawn." in lines
        assert "Interest: ₹24.00" in lines
        assert f"Account No: {number}\nName: Asha Rao\nBalance: ₹600" in lines
        assert app.registry.lookup(number).balance == Decimal("600")

    def test_invalid_amount(self, app: BankApp, number: str) -> None:
        lines = run_console(app, ["2", number, "2", "ten", "5", "3"])

        assert "Invalid amount." in lines
        assert app.registry.lookup(number).balance == 0

    @pytest.mark.parametrize("raw", ["1e999999999", "-1e999999999", "2000000000000000"])
    def test_out_of_range_amount(self, app: BankApp, number: str, raw: str) -> None:
        lines = run_console(app, ["2", number, "2", raw, "3", raw, "5", "3"])

        assert lines.count("Invalid amount.") == 2
        assert lines[-1] == "Thank you for using our system."
        assert app.registry.lookup(number).balance == 0

    def test_non_positive_amounts(self, app: BankApp, number: str) -> None:
        lines = run_console(app, ["2", number, "2", "-5", "3", "0", "5", "3"])

        assert lines.count("Amount must be positive.") == 2
        assert app.registry.lookup(number).balance == 0

    def test_invalid_option(self, app: BankApp, number: str) -> None:
        lines = run_console(app, ["2", number, "7", "5", "3"])
        assert "Invalid option." in lines

    def test_eof_in_dashboard_logs_out_and_exits(self, app: BankApp, number: str) -> None:
        lines = run_console(app, ["2", number])
        assert lines[-1] == "Thank you for using our system."


class TestMain:
    """Tests for the console entry point."""

    def test_main_runs_with_fixed_path(
        self, tmp_path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("builtins.input", scripted(["1", "Bala", "current", "3"]))

        main()

        out = capsys.readouterr().out
        assert "Your Account Number:" in out
        assert (tmp_path / "accounts.json").exists()


class TestEndOfInput:
    """Input ending in the middle of a prompt exits cleanly."""

    def test_eof_during_create(self, app: BankApp, config: BankConfig) -> None:
        lines = run_console(app, ["1", "Asha"])

        assert lines[-1] == "Thank you for using our system."
        assert len(app.registry) == 0
        assert config.storage.data_file.exists()

    def test_eof_during_amount(self, app: BankApp) -> None:
        number = app.create_account("Asha", "savings")

        lines = run_console(app, ["2", number, "2"])

        assert lines[-1] == "Thank you for using our system."
        assert app.registry.lookup(number).balance == 0

"""Allow ``python -m console_bank``."""

from console_bank.cli import main

if __name__ == "__main__":
    main()

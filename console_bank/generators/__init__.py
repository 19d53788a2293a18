"""Synthetic account generators for demos and manual testing."""

from console_bank.generators.account import DemoAccountGenerator
from console_bank.generators.base import BaseGenerator

__all__ = ["BaseGenerator", "DemoAccountGenerator"]

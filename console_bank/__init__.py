"""Console bank: single-user account management with JSON persistence."""

__version__ = "0.1.0"

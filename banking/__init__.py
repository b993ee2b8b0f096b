"""In-memory bank with debit, credit, saving and family accounts and PIN-protected cards."""

__version__ = "0.1.0"
"""The interface every kind of bank account implements."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod


class Account(ABC):
    """A balance that money can be withdrawn from and deposited into.

    Balances are whole numbers. Transaction amounts are non-negative whole
    numbers. A refused operation returns ``False`` and changes nothing.
    """

    @abstractmethod
    def reduce_balance(self, value: int) -> bool:
        """Withdraw ``value``; return whether the withdrawal was accepted."""

    @abstractmethod
    def increase_balance(self, value: int) -> bool:
        """Deposit ``value``; return whether the deposit was accepted."""

    @property
    @abstractmethod
    def balance(self) -> int:
        """The current balance of the account."""

    @property
    @abstractmethod
    def available_funds(self) -> int:
        """The largest amount that can currently be withdrawn."""

    @abstractmethod
    def clone(self) -> Account:
        """Return an independent account with the same state."""

    @staticmethod
    def _checked(value: int) -> int:
        """Return ``value`` as an int, rejecting negative amounts."""
        amount = operator.index(value)
        if amount < 0:
            raise ValueError("Negative transaction amount")
        return amount
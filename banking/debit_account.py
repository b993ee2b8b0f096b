"""An account that can never go below zero."""

from __future__ import annotations

from .account import Account


class DebitAccount(Account):
    """A plain account whose balance cannot become negative."""

    def __init__(self, value: int = 0) -> None:
        if value < 0:
            raise ValueError("Negative account balance")
        self._balance = int(value)

    def reduce_balance(self, value: int) -> bool:
        value = self._checked(value)
        if self._balance < value:
            return False
        self._balance -= value
        return True

    def increase_balance(self, value: int) -> bool:
        self._balance += self._checked(value)
        return True

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def available_funds(self) -> int:
        return self._balance

    def clone(self) -> DebitAccount:
        return DebitAccount(self._balance)

    def __repr__(self) -> str:
        return f"DebitAccount({self._balance})"
"""An account that earns a bonus on deposits; only the bonus is spendable."""

from __future__ import annotations

import copy

from .account import Account


class SavingAccount(Account):
    """Deposits earn ``bonus_rate`` of their value as a withdrawable bonus.

    The deposited money itself is locked; only the bonus can be withdrawn.
    """

    def __init__(self, bonus_rate: float, value: int = 0) -> None:
        if bonus_rate < 0:
            raise ValueError("Negative bonus rate")
        self._bonus_rate = bonus_rate
        self._balance = 0
        self._bonus_balance = 0
        SavingAccount.increase_balance(self, value)

    def reduce_balance(self, value: int) -> bool:
        value = self._checked(value)
        if value > self._bonus_balance:
            return False
        self._bonus_balance -= value
        return True

    def increase_balance(self, value: int) -> bool:
        value = self._checked(value)
        self._balance += value
        self._bonus_balance += int(value * self._bonus_rate)
        return True

    @property
    def balance(self) -> int:
        return self._balance + self._bonus_balance

    @property
    def available_funds(self) -> int:
        return self._bonus_balance

    def clone(self) -> SavingAccount:
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"SavingAccount(bonus_rate={self._bonus_rate}, "
            f"deposited={self._balance}, bonus={self._bonus_balance})"
        )
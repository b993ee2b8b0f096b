"""An account that may go into debt up to a limit, paying a commission."""

from __future__ import annotations

import copy

from .account import Account


class CreditAccount(Account):
    """An account allowed to go negative down to ``-credit_limit``.

    Every withdrawal costs the amount multiplied by ``1 + commission_rate``.
    """

    def __init__(self, credit_limit: int, commission_rate: float) -> None:
        if credit_limit <= 0:
            raise ValueError("Negative credit limit")
        if commission_rate < 0:
            raise ValueError("Negative commission rate")
        self._limit = -int(credit_limit)
        self._commission = 1 + commission_rate
        self._balance = 0

    def reduce_balance(self, value: int) -> bool:
        value = self._checked(value)
        new_balance = self._balance - int(value * self._commission)
        if new_balance < self._limit:
            return False
        self._balance = new_balance
        return True

    def increase_balance(self, value: int) -> bool:
        self._balance += self._checked(value)
        return True

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def available_funds(self) -> int:
        return int((self._balance - self._limit) / self._commission)

    def clone(self) -> CreditAccount:
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"CreditAccount(credit_limit={-self._limit}, "
            f"commission_rate={self._commission - 1}, balance={self._balance})"
        )
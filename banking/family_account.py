"""An account that pools the funds of other accounts without owning them."""

from __future__ import annotations

import weakref
from collections.abc import Iterable

from .account import Account


class FamilyAccount(Account):
    """A view over linked accounts, spending from them in link order.

    Links are weak: an account that no longer exists elsewhere drops out.
    Deposits into a family account are always refused.
    """

    def __init__(self, accounts: Iterable[Account] = ()) -> None:
        self._links: list[weakref.ref[Account]] = [weakref.ref(a) for a in accounts]

    def link_account(self, account: Account) -> FamilyAccount:
        """Add ``account`` to the pool and return this family account."""
        self._links.append(weakref.ref(account))
        return self

    def _live_accounts(self) -> list[Account]:
        live = []
        kept = []
        for link in self._links:
            account = link()
            if account is not None:
                live.append(account)
                kept.append(link)
        self._links = kept
        return live

    def reduce_balance(self, value: int) -> bool:
        value = self._checked(value)
        accounts = self._live_accounts()
        if sum(a.available_funds for a in accounts) < value:
            return False
        remaining = value
        for account in accounts:
            if remaining <= 0:
                break
            part = min(remaining, account.available_funds)
            account.reduce_balance(part)
            remaining -= part
        return True

    def increase_balance(self, value: int) -> bool:
        return False

    @property
    def balance(self) -> int:
        return sum(a.balance for a in self._live_accounts())

    @property
    def available_funds(self) -> int:
        return sum(a.available_funds for a in self._live_accounts())

    def clone(self) -> FamilyAccount:
        return FamilyAccount(self._live_accounts())

    def __len__(self) -> int:
        return len(self._live_accounts())
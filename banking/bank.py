"""A bank that issues PIN-protected cards for the accounts it holds."""

from __future__ import annotations

import enum
import operator
import random
from dataclasses import dataclass

from .account import Account

_MIN_PIN = 0
_MAX_PIN = 2**64 - 1


class OperationStatus(enum.Enum):
    """Outcome of a bank operation."""

    SUCCESS = "success"
    WRONG_PIN = "wrong_pin"
    INVALID_SOURCE_ACCOUNT = "invalid_source_account"
    INVALID_DESTINATION_ACCOUNT = "invalid_destination_account"
    NOT_ENOUGH_MONEY = "not_enough_money"
    OPERATION_DECLINED = "operation_declined"


class BankError(Exception):
    """Base class for refused bank operations."""

    status: OperationStatus = OperationStatus.OPERATION_DECLINED


class WrongPinError(BankError):
    """The PIN does not match the card."""

    status = OperationStatus.WRONG_PIN


class InvalidSourceAccountError(BankError):
    """The card refers to an account the bank does not hold."""

    status = OperationStatus.INVALID_SOURCE_ACCOUNT


class InvalidDestinationAccountError(BankError):
    """The receiving account does not exist."""

    status = OperationStatus.INVALID_DESTINATION_ACCOUNT


class NotEnoughMoneyError(BankError):
    """The source account cannot cover the amount."""

    status = OperationStatus.NOT_ENOUGH_MONEY


class OperationDeclinedError(BankError):
    """The receiving account refused the deposit."""

    status = OperationStatus.OPERATION_DECLINED


class Card:
    """A bank card giving access to one account once the PIN is known."""

    __slots__ = ("_account_id", "_pin")

    def __init__(self, account_id: int, pin: int) -> None:
        self._account_id = account_id
        self._pin = pin

    def _set_password(self, old_pin: int, new_pin: int) -> None:
        if self._pin != old_pin:
            raise WrongPinError("Wrong PIN")
        self._pin = new_pin

    def _account_id_for(self, pin: int) -> int:
        if self._pin != pin:
            raise WrongPinError("Wrong PIN")
        return self._account_id

    def __repr__(self) -> str:
        return f"Card(account_id={self._account_id})"


@dataclass(frozen=True)
class AccountInfo:
    """What a customer receives when an account is opened."""

    card: Card
    account_id: int
    pin_code: int


def _amount(value: int) -> int:
    amount = operator.index(value)
    if amount < 0:
        raise ValueError("Negative transaction amount")
    return amount


class Bank:
    """Holds accounts by id and gives access to them through cards.

    Failed operations raise a ``BankError`` subclass whose ``status``
    names the reason.
    """

    def __init__(self, seed: int = 0) -> None:
        self._next_id = 0
        self._accounts: dict[int, Account] = {}
        self._random = random.Random(seed)

    def _generate_pin(self) -> int:
        return self._random.randint(_MIN_PIN, _MAX_PIN)

    def _account(self, card: Card, pin: int) -> Account:
        account_id = card._account_id_for(pin)
        try:
            return self._accounts[account_id]
        except KeyError:
            raise InvalidSourceAccountError(
                f"No account with id {account_id}"
            ) from None

    def open_new_account(self, account: Account) -> AccountInfo:
        """Store ``account`` under a fresh id and issue a card for it."""
        account_id = self._next_id
        self._accounts[account_id] = account
        pin = self._generate_pin()
        self._next_id += 1
        return AccountInfo(card=Card(account_id, pin), account_id=account_id, pin_code=pin)

    def open_same_account(self, card: Card, pin: int) -> AccountInfo:
        """Open a new account that starts as a copy of the card's account."""
        return self.open_new_account(self._account(card, pin).clone())

    def close_account(self, card: Card, pin: int) -> None:
        """Remove the card's account from the bank."""
        account_id = card._account_id_for(pin)
        if self._accounts.pop(account_id, None) is None:
            raise InvalidSourceAccountError(f"No account with id {account_id}")

    @staticmethod
    def change_password(card: Card, old_pin: int, new_pin: int) -> None:
        """Replace the card's PIN, given the current one."""
        card._set_password(old_pin, new_pin)

    def get_cash(self, amount: int, card: Card, pin: int) -> None:
        """Withdraw ``amount`` from the card's account."""
        amount = _amount(amount)
        account = self._account(card, pin)
        if not account.reduce_balance(amount):
            raise NotEnoughMoneyError("Not enough money")

    def transfer_to_account(
        self, other_account: int, amount: int, card: Card, pin: int
    ) -> None:
        """Move ``amount`` from the card's account to ``other_account``."""
        amount = _amount(amount)
        source = self._account(card, pin)
        if source.available_funds < amount:
            raise NotEnoughMoneyError("Not enough money")
        destination = self._accounts.get(other_account)
        if destination is None:
            raise InvalidDestinationAccountError(f"No account with id {other_account}")
        if not destination.increase_balance(amount):
            raise OperationDeclinedError("Deposit refused by destination account")
        source.reduce_balance(amount)

    def get_balance(self, card: Card, pin: int) -> int:
        """Return the balance of the card's account."""
        return self._account(card, pin).balance
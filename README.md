# banking

A small in-memory bank. Accounts of several kinds share one interface,
and a `Bank` holds them behind cards protected by a PIN.

## Installation

```
pip install .
```

## Account types

All accounts derive from the abstract class `banking.account.Account`.
Each one offers:

- `reduce_balance(value)` – withdraw; returns `True` if the account
  accepted the withdrawal, `False` if it refused (nothing changes then).
- `increase_balance(value)` – deposit; returns `True` or `False` the same
  way.
- `balance` – a read-only property with the current balance.
- `available_funds` – a read-only property with the largest amount that
  can be withdrawn right now.
- `clone()` – an independent account with the same state.

Amounts are whole numbers. A negative amount raises `ValueError`; a
non-integer amount raises `TypeError`.

The account kinds:

- `banking.debit_account.DebitAccount(value=0)` – a plain account that
  cannot go below zero. A negative starting value raises `ValueError`.
- `banking.credit_account.CreditAccount(credit_limit, commission_rate)` –
  starts at zero and may go down to `-credit_limit`. Each withdrawal of
  `value` takes `int(value * (1 + commission_rate))` from the balance, and
  `available_funds` is what remains before the limit divided by that
  factor. A non-positive limit or a negative rate raises `ValueError`.
- `banking.saving_account.SavingAccount(bonus_rate, value=0)` – every
  deposit of `value` adds `int(value * bonus_rate)` as a bonus. The
  deposited money is locked: only the bonus can be withdrawn, and
  `balance` is deposits plus bonus. A negative rate raises `ValueError`.
- `banking.family_account.FamilyAccount(accounts=())` – pools linked
  accounts. `link_account(account)` adds one and returns the family
  account. Deposits are always refused. Withdrawals are taken from the
  linked accounts in link order. Links are weak references: an account
  that no longer exists anywhere else drops out of the pool. `len()` gives
  the number of live linked accounts.

```python
from banking.debit_account import DebitAccount
from banking.saving_account import SavingAccount
from banking.family_account import FamilyAccount

mine = DebitAccount(100)
yours = SavingAccount(0.5, 200)      # balance 300, available 100
family = FamilyAccount([mine, yours])
family.reduce_balance(150)           # True: 100 from mine, 50 from yours
print(family.available_funds)        # 50
```

## The bank

```python
from banking.bank import Bank
from banking.debit_account import DebitAccount
from banking.credit_account import CreditAccount

bank = Bank(seed=0)
alice = bank.open_new_account(DebitAccount(1000))
bob = bank.open_new_account(CreditAccount(500, 0.1))

bank.transfer_to_account(bob.account_id, 300, alice.card, alice.pin_code)
bank.get_cash(100, bob.card, bob.pin_code)
print(bank.get_balance(alice.card, alice.pin_code))   # 700
```

`Bank(seed=0)` seeds the generator for PINs, so PINs are repeatable for a
given seed. Account ids are issued from 0 upwards.

- `open_new_account(account)` stores the account and returns an
  `AccountInfo` with the `card`, the `account_id` and the generated
  `pin_code`.
- `open_same_account(card, pin)` opens a new account that starts as a
  clone of the card's account and returns its `AccountInfo`.
- `close_account(card, pin)` removes the card's account.
- `Bank.change_password(card, old_pin, new_pin)` (static) changes the
  card's PIN.
- `get_cash(amount, card, pin)` withdraws from the card's account.
- `transfer_to_account(other_account, amount, card, pin)` moves money from
  the card's account to the account with id `other_account`.
- `get_balance(card, pin)` returns the balance of the card's account.

When an operation fails, the bank raises a subclass of `BankError`:
`WrongPinError`, `InvalidSourceAccountError`,
`InvalidDestinationAccountError`, `NotEnoughMoneyError` or
`OperationDeclinedError`. Each error class has a `status` attribute with
the matching `OperationStatus` member.

## What it does not do

Everything lives in memory: accounts are not stored anywhere and are lost
when the program ends. There is no command-line program or server; the
package is used as a library.

## Running the tests

```
pip install .[test]
pytest
```
import pytest

from banking.bank import (
    AccountInfo,
    Bank,
    BankError,
    InvalidDestinationAccountError,
    InvalidSourceAccountError,
    NotEnoughMoneyError,
    OperationDeclinedError,
    OperationStatus,
    WrongPinError,
)
from banking.debit_account import DebitAccount
from banking.family_account import FamilyAccount


@pytest.fixture
def bank():
    return Bank()


def test_account_ids_are_sequential(bank):
    first = bank.open_new_account(DebitAccount(10))
    second = bank.open_new_account(DebitAccount(20))
    assert isinstance(first, AccountInfo)
    assert first.account_id == 0
    assert second.account_id == 1


def test_pins_are_reproducible_with_same_seed():
    a = Bank(7).open_new_account(DebitAccount())
    b = Bank(7).open_new_account(DebitAccount())
    assert a.pin_code == b.pin_code
    assert 0 <= a.pin_code < 2**64


def test_get_balance(bank):
    info = bank.open_new_account(DebitAccount(150))
    assert bank.get_balance(info.card, info.pin_code) == 150


def test_wrong_pin(bank):
    info = bank.open_new_account(DebitAccount(150))
    with pytest.raises(WrongPinError) as excinfo:
        bank.get_balance(info.card, info.pin_code + 1)
    assert excinfo.value.status is OperationStatus.WRONG_PIN


def test_get_cash(bank):
    info = bank.open_new_account(DebitAccount(100))
    bank.get_cash(40, info.card, info.pin_code)
    assert bank.get_balance(info.card, info.pin_code) == 60
    with pytest.raises(NotEnoughMoneyError):
        bank.get_cash(61, info.card, info.pin_code)
    assert bank.get_balance(info.card, info.pin_code) == 60


def test_change_password(bank):
    info = bank.open_new_account(DebitAccount(5))
    new_pin = info.pin_code + 1
    Bank.change_password(info.card, info.pin_code, new_pin)
    assert bank.get_balance(info.card, new_pin) == 5
    with pytest.raises(WrongPinError):
        bank.get_balance(info.card, info.pin_code)
    with pytest.raises(WrongPinError):
        Bank.change_password(info.card, info.pin_code, new_pin)


def test_close_account(bank):
    info = bank.open_new_account(DebitAccount(5))
    with pytest.raises(WrongPinError):
        bank.close_account(info.card, info.pin_code + 1)
    bank.close_account(info.card, info.pin_code)
    with pytest.raises(InvalidSourceAccountError):
        bank.get_balance(info.card, info.pin_code)
    with pytest.raises(InvalidSourceAccountError):
        bank.close_account(info.card, info.pin_code)


def test_open_same_account_copies_state(bank):
    info = bank.open_new_account(DebitAccount(70))
    copy_info = bank.open_same_account(info.card, info.pin_code)
    assert copy_info.account_id == info.account_id + 1
    assert bank.get_balance(copy_info.card, copy_info.pin_code) == 70
    bank.get_cash(70, copy_info.card, copy_info.pin_code)
    assert bank.get_balance(info.card, info.pin_code) == 70


def test_open_same_account_errors(bank):
    info = bank.open_new_account(DebitAccount(1))
    with pytest.raises(WrongPinError):
        bank.open_same_account(info.card, info.pin_code + 1)
    bank.close_account(info.card, info.pin_code)
    with pytest.raises(InvalidSourceAccountError):
        bank.open_same_account(info.card, info.pin_code)


def test_transfer(bank):
    src = bank.open_new_account(DebitAccount(100))
    dst = bank.open_new_account(DebitAccount(10))
    bank.transfer_to_account(dst.account_id, 30, src.card, src.pin_code)
    src_balance = bank.get_balance(src.card, src.pin_code)
    dst_balance = bank.get_balance(dst.card, dst.pin_code)
    assert src_balance + dst_balance == 110
    assert src_balance == 70


def test_transfer_not_enough_money(bank):
    src = bank.open_new_account(DebitAccount(10))
    dst = bank.open_new_account(DebitAccount())
    with pytest.raises(NotEnoughMoneyError):
        bank.transfer_to_account(dst.account_id, 11, src.card, src.pin_code)
    assert bank.get_balance(src.card, src.pin_code) == 10


def test_transfer_invalid_destination(bank):
    src = bank.open_new_account(DebitAccount(10))
    with pytest.raises(InvalidDestinationAccountError) as excinfo:
        bank.transfer_to_account(src.account_id + 5, 5, src.card, src.pin_code)
    assert excinfo.value.status is OperationStatus.INVALID_DESTINATION_ACCOUNT
    assert bank.get_balance(src.card, src.pin_code) == 10


def test_transfer_declined_by_family_account(bank):
    member = DebitAccount(50)
    member_info = bank.open_new_account(member)
    family_info = bank.open_new_account(FamilyAccount([member]))
    with pytest.raises(OperationDeclinedError):
        bank.transfer_to_account(
            family_info.account_id, 5, member_info.card, member_info.pin_code
        )
    assert bank.get_balance(member_info.card, member_info.pin_code) == 50


def test_errors_share_base_class(bank):
    info = bank.open_new_account(DebitAccount())
    with pytest.raises(BankError):
        bank.get_cash(1, info.card, info.pin_code)


def test_negative_amount_rejected(bank):
    info = bank.open_new_account(DebitAccount(10))
    with pytest.raises(ValueError):
        bank.get_cash(-1, info.card, info.pin_code)
from unittest.mock import AsyncMock, MagicMock

import pytest

from tonwallet.domain.enums import AccountKind, SyncStatus
from tonwallet.domain.models import Account, Address, SyncState, Token, TokenType, TransactionSource, Wallet


def make_address(fill: int, workchain: int = 0) -> Address:
    return Address(workchain=workchain, hash_part=bytes([fill]) * 32)


@pytest.fixture()
def ton_token() -> Token:
    return Token(coin_code="TON", coin_name="Toncoin", decimals=9)


@pytest.fixture()
def jetton_master() -> Address:
    return make_address(0xAB)


@pytest.fixture()
def jetton_token(jetton_master) -> Token:
    return Token(
        type=TokenType.jetton(jetton_master.to_friendly(bounceable=True)),
        coin_code="USDT",
        coin_name="Tether USD",
        decimals=6,
    )


@pytest.fixture()
def source() -> TransactionSource:
    return TransactionSource()


@pytest.fixture()
def account() -> Account:
    return Account(id="acc-1", kind=AccountKind.MNEMONIC, seed=b"\x01" * 64)


@pytest.fixture()
def jetton_wallet(jetton_token, account) -> Wallet:
    return Wallet(token=jetton_token, account=account)


@pytest.fixture()
def kit() -> MagicMock:
    """Stand-in for the TON SDK kit: synced, empty history, no jettons."""
    mock = MagicMock()
    mock.address = make_address(0x01)
    mock.receive_address = make_address(0x01)
    mock.sync_state = SyncState(status=SyncStatus.SYNCED)
    mock.balance = 0
    mock.jettons = []
    mock.jetton_balance.return_value = 0
    mock.transactions.return_value = []
    mock.estimate_fee = AsyncMock(return_value=0)
    mock.send = AsyncMock(return_value=None)
    return mock

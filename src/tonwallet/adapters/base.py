"""Kit interface and shared adapter plumbing."""

import logging
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from tonwallet.config import settings
from tonwallet.domain.enums import AdapterStatus, SyncStatus
from tonwallet.domain.models.address import Address
from tonwallet.domain.models.kit import AccountEvent, Jetton, SyncState, TransactionTagQuery
from tonwallet.exceptions import AddressError, WrongAddressError

logger = logging.getLogger(__name__)


class TonKit(Protocol):
    """What the adapters consume from the TON SDK. Amounts are in smallest units."""

    @property
    def address(self) -> Address: ...

    @property
    def receive_address(self) -> Address: ...

    @property
    def sync_state(self) -> SyncState: ...

    @property
    def balance(self) -> int: ...

    @property
    def jettons(self) -> Sequence[Jetton]: ...

    def jetton_balance(self, address: Address) -> int: ...

    def transactions(
        self,
        tag_queries: list[TransactionTagQuery],
        before_lt: int | None = None,
        limit: int | None = None,
    ) -> list[AccountEvent]: ...

    async def estimate_fee(
        self, recipient: str, amount: int, comment: str | None = None, jetton: Jetton | None = None
    ) -> int: ...

    async def send(
        self, recipient: str, amount: int, comment: str | None = None, jetton: Jetton | None = None
    ) -> None: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def refresh(self) -> None: ...


class AdapterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: AdapterStatus
    progress: int | None = None
    error: str | None = None

    @property
    def syncing(self) -> bool:
        return self.status == AdapterStatus.SYNCING


class BalanceData(BaseModel):
    model_config = ConfigDict(frozen=True)

    available: Decimal


def adapter_state(sync_state: SyncState) -> AdapterState:
    """Map the kit's sync state onto the wallet's adapter state."""
    if sync_state.status == SyncStatus.SYNCING:
        return AdapterState(status=AdapterStatus.SYNCING)
    if sync_state.status == SyncStatus.SYNCED:
        return AdapterState(status=AdapterStatus.SYNCED)
    return AdapterState(status=AdapterStatus.NOT_SYNCED, error=sync_state.error)


def validate_address(address: str) -> Address:
    try:
        return Address.parse(address)
    except AddressError as exc:
        raise WrongAddressError(str(exc)) from exc


class BaseTonAdapter:
    """Kit lifecycle and sync-state plumbing shared by native and jetton adapters.

    ``is_reachable`` reports network reachability; the kit is only started when it returns True.
    """

    def __init__(
        self,
        kit: TonKit,
        is_reachable: Callable[[], bool] | None = None,
        bounceable: bool | None = None,
    ) -> None:
        self._kit = kit
        self._is_reachable = is_reachable or (lambda: True)
        self._bounceable = settings.bounceable_default if bounceable is None else bounceable
        self._kit_started = False

    @property
    def is_main_net(self) -> bool:
        return not settings.testnet

    @property
    def adapter_state(self) -> AdapterState:
        return adapter_state(self._kit.sync_state)

    @property
    def balance_state(self) -> AdapterState:
        return self.adapter_state

    @property
    def syncing(self) -> bool:
        return self.adapter_state.syncing

    @property
    def receive_address(self) -> str:
        return self._kit.receive_address.to_friendly(bounceable=self._bounceable, testnet=settings.testnet)

    def validate(self, address: str) -> None:
        validate_address(address)

    def start(self) -> None:
        if self._is_reachable():
            self._start_kit()

    def stop(self) -> None:
        if self._kit_started:
            self._stop_kit()

    def refresh(self) -> None:
        self._kit.refresh()

    def _start_kit(self) -> None:
        logger.debug("%s, start kit.", type(self).__name__)
        self._kit.start()
        self._kit_started = True

    def _stop_kit(self) -> None:
        logger.debug("%s, stop kit.", type(self).__name__)
        self._kit.stop()
        self._kit_started = False

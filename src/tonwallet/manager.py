"""TonKitManager: one TON kit per active account, started and stopped with the app."""

import logging
import threading
from collections.abc import Callable

from tonwallet.adapters.base import TonKit, validate_address
from tonwallet.config import Settings
from tonwallet.domain.enums import AccountKind, Network
from tonwallet.domain.models.token import Account
from tonwallet.exceptions import MnemonicNoSeedError, UnsupportedAccountError

logger = logging.getLogger(__name__)

# (account, network) -> new, not yet started kit. Key derivation happens inside the factory.
KitFactory = Callable[[Account, Network], TonKit]


class TonKitManager:
    def __init__(self, kit_factory: KitFactory, settings: Settings) -> None:
        self._kit_factory = kit_factory
        self._settings = settings
        self._lock = threading.RLock()
        self._kit: TonKit | None = None
        self._current_account: Account | None = None
        self._kit_started = False
        self._created_listeners: list[Callable[[TonKit], None]] = []

    @property
    def network(self) -> Network:
        return Network.TESTNET if self._settings.testnet else Network.MAINNET

    @property
    def kit(self) -> TonKit | None:
        with self._lock:
            return self._kit

    def on_kit_created(self, listener: Callable[[TonKit], None]) -> None:
        self._created_listeners.append(listener)

    def kit_for(self, account: Account) -> TonKit:
        """Return the kit for ``account``, building and starting a new one if the account changed."""
        with self._lock:
            if self._kit is not None and self._current_account == account:
                return self._kit

            self._check_account(account)
            kit = self._kit_factory(account, self.network)

            logger.info("TonKitManager: create and start kit for account %s on %s", account.id, self.network.value)
            kit.start()
            self._kit_started = True
            self._kit = kit
            self._current_account = account

        for listener in list(self._created_listeners):
            listener(kit)
        return kit

    def will_enter_foreground(self) -> None:
        with self._lock:
            if not self._kit_started and self._kit is not None:
                logger.debug("TonKitManager: start kit")
                self._kit.start()
                self._kit_started = True

    def did_enter_background(self) -> None:
        with self._lock:
            if self._kit_started and self._kit is not None:
                logger.debug("TonKitManager: stop kit")
                self._kit.stop()
                self._kit_started = False

    def _check_account(self, account: Account) -> None:
        if account.kind == AccountKind.MNEMONIC:
            if not account.seed:
                raise MnemonicNoSeedError(f"Account {account.id} has no mnemonic seed")
        elif account.kind == AccountKind.TON_ADDRESS:
            validate_address(account.address or "")
        else:
            raise UnsupportedAccountError(f"Account kind {account.kind.value} is not supported on TON")

from enum import Enum


class SyncStatus(str, Enum):
    """Kit synchronisation state as reported by the SDK."""

    SYNCING = "syncing"
    SYNCED = "synced"
    NOT_SYNCED = "not_synced"


class AdapterStatus(str, Enum):
    SYNCING = "syncing"
    SYNCED = "synced"
    NOT_SYNCED = "not_synced"


class AccountKind(str, Enum):
    MNEMONIC = "mnemonic"
    TON_ADDRESS = "ton_address"
    EVM_ADDRESS = "evm_address"
    PRIVATE_KEY = "private_key"

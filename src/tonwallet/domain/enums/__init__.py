from tonwallet.domain.enums.blockchain import BlockchainType, Network
from tonwallet.domain.enums.decoration import ActionKind, DecorationKind
from tonwallet.domain.enums.status import AccountKind, AdapterStatus, SyncStatus
from tonwallet.domain.enums.token import TokenKind
from tonwallet.domain.enums.transaction import RecordType, TagProtocol, TagType, TransactionTypeFilter

__all__ = [
    "AccountKind",
    "ActionKind",
    "AdapterStatus",
    "BlockchainType",
    "DecorationKind",
    "Network",
    "RecordType",
    "SyncStatus",
    "TagProtocol",
    "TagType",
    "TokenKind",
    "TransactionTypeFilter",
]

from tonwallet.domain.models.address import Address, FriendlyAddress
from tonwallet.domain.models.kit import (
    AccountEvent,
    Action,
    Decoration,
    IncomingDecoration,
    IncomingJettonDecoration,
    Jetton,
    JettonTransfer,
    OutgoingDecoration,
    OutgoingJettonDecoration,
    SyncState,
    TonTransfer,
    TransactionTagQuery,
    UnknownAction,
    UnknownDecoration,
)
from tonwallet.domain.models.records import (
    BaseTransactionRecord,
    JettonIncomingTransactionRecord,
    JettonOutgoingTransactionRecord,
    TonIncomingTransactionRecord,
    TonOutgoingTransactionRecord,
    TonTransactionRecord,
    TransactionRecord,
    TransactionRecordAdapter,
    TransactionValue,
    Transfer,
)
from tonwallet.domain.models.token import Account, Token, TokenType, TransactionSource, Wallet

__all__ = [
    "AccountEvent",
    "Account",
    "Action",
    "Address",
    "BaseTransactionRecord",
    "Decoration",
    "FriendlyAddress",
    "IncomingDecoration",
    "IncomingJettonDecoration",
    "Jetton",
    "JettonIncomingTransactionRecord",
    "JettonOutgoingTransactionRecord",
    "JettonTransfer",
    "OutgoingDecoration",
    "OutgoingJettonDecoration",
    "SyncState",
    "Token",
    "TokenType",
    "TonIncomingTransactionRecord",
    "TonOutgoingTransactionRecord",
    "TonTransactionRecord",
    "TonTransfer",
    "TransactionRecord",
    "TransactionRecordAdapter",
    "TransactionSource",
    "TransactionTagQuery",
    "TransactionValue",
    "Transfer",
    "UnknownAction",
    "UnknownDecoration",
    "Wallet",
]

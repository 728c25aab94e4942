from enum import Enum


class TransactionTypeFilter(str, Enum):
    """Filter the wallet UI applies when listing transactions."""

    ALL = "all"
    INCOMING = "incoming"
    OUTGOING = "outgoing"
    SWAP = "swap"
    APPROVE = "approve"


class TagType(str, Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"
    SWAP = "swap"
    APPROVE = "approve"


class TagProtocol(str, Enum):
    NATIVE = "native"
    JETTON = "jetton"


class RecordType(str, Enum):
    """Discriminator of the transaction-record union."""

    TON = "ton"
    TON_INCOMING = "ton_incoming"
    TON_OUTGOING = "ton_outgoing"
    JETTON_INCOMING = "jetton_incoming"
    JETTON_OUTGOING = "jetton_outgoing"

from enum import Enum


class DecorationKind(str, Enum):
    """Semantic shape the kit attached to an account event."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"
    INCOMING_JETTON = "incoming_jetton"
    OUTGOING_JETTON = "outgoing_jetton"
    UNKNOWN = "unknown"


class ActionKind(str, Enum):
    TON_TRANSFER = "ton_transfer"
    JETTON_TRANSFER = "jetton_transfer"
    UNKNOWN = "unknown"

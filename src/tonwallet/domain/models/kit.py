"""Types produced by the TON kit. This package reads them and never builds them in production code."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from tonwallet.domain.enums import ActionKind, DecorationKind, SyncStatus, TagProtocol, TagType
from tonwallet.domain.models.address import Address


class Jetton(BaseModel):
    """Jetton metadata as discovered by the kit."""

    model_config = ConfigDict(frozen=True)

    address: Address  # jetton master contract
    name: str = ""
    symbol: str = ""
    decimals: int = 9
    image_url: str | None = None


# --- Actions ---


class TonTransfer(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ActionKind.TON_TRANSFER] = ActionKind.TON_TRANSFER
    sender: Address | None = None
    recipient: Address | None = None
    amount: int = Field(ge=0)
    comment: str | None = None


class JettonTransfer(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ActionKind.JETTON_TRANSFER] = ActionKind.JETTON_TRANSFER
    sender: Address | None = None
    recipient: Address | None = None
    amount: int = Field(ge=0)  # smallest jetton units
    jetton: Jetton | None = None
    comment: str | None = None


class UnknownAction(BaseModel):
    """Any action type this layer does not interpret (swaps, NFT moves, contract calls)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ActionKind.UNKNOWN] = ActionKind.UNKNOWN
    name: str = ""


Action = Annotated[Union[TonTransfer, JettonTransfer, UnknownAction], Field(discriminator="kind")]


# --- Decorations ---


class IncomingDecoration(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecorationKind.INCOMING] = DecorationKind.INCOMING


class OutgoingDecoration(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecorationKind.OUTGOING] = DecorationKind.OUTGOING
    sent_to_self: bool = False


class IncomingJettonDecoration(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecorationKind.INCOMING_JETTON] = DecorationKind.INCOMING_JETTON


class OutgoingJettonDecoration(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecorationKind.OUTGOING_JETTON] = DecorationKind.OUTGOING_JETTON
    sent_to_self: bool = False


class UnknownDecoration(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[DecorationKind.UNKNOWN] = DecorationKind.UNKNOWN


Decoration = Annotated[
    Union[
        IncomingDecoration,
        OutgoingDecoration,
        IncomingJettonDecoration,
        OutgoingJettonDecoration,
        UnknownDecoration,
    ],
    Field(discriminator="kind"),
]


class AccountEvent(BaseModel):
    """One on-chain event for the wallet account, with exactly one decoration."""

    model_config = ConfigDict(frozen=True)

    event_id: str
    lt: int = 0  # logical time, pagination cursor
    timestamp: int = 0
    in_progress: bool = False
    actions: tuple[Action, ...] = ()
    decoration: Decoration = UnknownDecoration()


# --- Queries and state ---


class TransactionTagQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TagType | None = None
    protocol: TagProtocol | None = None
    jetton_address: Address | None = None
    address: str | None = None  # counterparty, raw form


class SyncState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: SyncStatus
    error: str | None = None

"""Wallet-internal transaction records built from kit account events.

Every record shares a header (source, event, fee token) and carries a
``record_type`` discriminator, so a list of records round-trips through
``TransactionRecordAdapter`` without losing the variant.
"""

from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from tonwallet.domain.enums import RecordType
from tonwallet.domain.models.kit import AccountEvent
from tonwallet.domain.models.token import Token, TransactionSource


class TransactionValue(BaseModel):
    """A signed amount of a token. Negative = debit from the wallet."""

    model_config = ConfigDict(frozen=True)

    token: Token
    value: Decimal

    @property
    def is_zero(self) -> bool:
        return self.value.is_zero()


class Transfer(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str  # recipient, user-friendly form
    value: TransactionValue


class BaseTransactionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: TransactionSource
    event: AccountEvent
    fee_token: Token

    @property
    def transaction_hash(self) -> str:
        return self.event.event_id

    @property
    def lt(self) -> int:
        return self.event.lt

    @property
    def timestamp(self) -> int:
        return self.event.timestamp

    @property
    def main_value(self) -> TransactionValue | None:
        return None


class TonTransactionRecord(BaseTransactionRecord):
    """Generic record for events this layer does not classify further."""

    record_type: Literal[RecordType.TON] = RecordType.TON


class TonIncomingTransactionRecord(BaseTransactionRecord):
    record_type: Literal[RecordType.TON_INCOMING] = RecordType.TON_INCOMING
    token: Token


class TonOutgoingTransactionRecord(BaseTransactionRecord):
    record_type: Literal[RecordType.TON_OUTGOING] = RecordType.TON_OUTGOING
    token: Token
    sent_to_self: bool = False


class JettonIncomingTransactionRecord(BaseTransactionRecord):
    record_type: Literal[RecordType.JETTON_INCOMING] = RecordType.JETTON_INCOMING
    token: Token
    transfer: Transfer | None = None

    @property
    def main_value(self) -> TransactionValue | None:
        return self.transfer.value if self.transfer is not None else None


class JettonOutgoingTransactionRecord(BaseTransactionRecord):
    record_type: Literal[RecordType.JETTON_OUTGOING] = RecordType.JETTON_OUTGOING
    token: Token
    transfers: tuple[Transfer, ...] = ()
    total_value: TransactionValue
    sent_to_self: bool = False

    @property
    def main_value(self) -> TransactionValue | None:
        return self.total_value


TransactionRecord = Annotated[
    Union[
        TonTransactionRecord,
        TonIncomingTransactionRecord,
        TonOutgoingTransactionRecord,
        JettonIncomingTransactionRecord,
        JettonOutgoingTransactionRecord,
    ],
    Field(discriminator="record_type"),
]

TransactionRecordAdapter: TypeAdapter[TransactionRecord] = TypeAdapter(TransactionRecord)

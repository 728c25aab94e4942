"""TonTransactionConverter: maps a decorated kit event to a wallet transaction record."""

from decimal import Decimal

from tonwallet.config import settings
from tonwallet.converter.amount import exact_sum, negate, to_decimal
from tonwallet.domain.enums import DecorationKind
from tonwallet.domain.models.kit import AccountEvent, JettonTransfer
from tonwallet.domain.models.records import (
    JettonIncomingTransactionRecord,
    JettonOutgoingTransactionRecord,
    TonIncomingTransactionRecord,
    TonOutgoingTransactionRecord,
    TonTransactionRecord,
    TransactionRecord,
    TransactionValue,
    Transfer,
)
from tonwallet.domain.models.token import Token, TransactionSource


class TonTransactionConverter:
    """Classifies events by decoration kind.

    DECORATION_HANDLERS maps each decoration kind to a handler method name.
    Kinds missing from the table (including ones the kit adds later) produce
    the generic TonTransactionRecord.

    Handler method signature:
        def _xxx(self, event, fee_token, token, source) -> TransactionRecord
    """

    DECORATION_HANDLERS: dict[DecorationKind, str] = {
        DecorationKind.INCOMING: "_incoming",
        DecorationKind.OUTGOING: "_outgoing",
        DecorationKind.INCOMING_JETTON: "_incoming_jetton",
        DecorationKind.OUTGOING_JETTON: "_outgoing_jetton",
    }

    def __init__(self, source: TransactionSource, base_token: Token, bounceable: bool | None = None) -> None:
        self._source = source
        self._base_token = base_token
        self._bounceable = settings.bounceable_default if bounceable is None else bounceable

    @property
    def default_token(self) -> Token:
        return self._base_token

    def transaction_record(self, event: AccountEvent, token: Token | None = None) -> TransactionRecord:
        """Convert one event; ``token`` overrides the transferred token (defaults to default_token)."""
        return self.classify(event, self._base_token, token or self.default_token, self._source)

    def classify(
        self,
        event: AccountEvent,
        fee_token: Token,
        token: Token,
        source: TransactionSource,
    ) -> TransactionRecord:
        handler_name = self.DECORATION_HANDLERS.get(event.decoration.kind)
        if handler_name is None:
            return TonTransactionRecord(source=source, event=event, fee_token=fee_token)
        return getattr(self, handler_name)(event, fee_token, token, source)

    # --- Native ---

    def _incoming(self, event, fee_token, token, source) -> TonIncomingTransactionRecord:
        # Native coin: the transferred token is always the fee token.
        return TonIncomingTransactionRecord(source=source, event=event, fee_token=fee_token, token=fee_token)

    def _outgoing(self, event, fee_token, token, source) -> TonOutgoingTransactionRecord:
        return TonOutgoingTransactionRecord(
            source=source,
            event=event,
            fee_token=fee_token,
            token=fee_token,
            sent_to_self=event.decoration.sent_to_self,
        )

    # --- Jetton ---

    def _incoming_jetton(self, event, fee_token, token, source) -> JettonIncomingTransactionRecord:
        transfer = None
        actions = self._jetton_transfers(event)
        if actions:
            first = actions[0]
            transfer = self._make_transfer(first, token, to_decimal(first.amount, token.decimals))

        return JettonIncomingTransactionRecord(
            source=source,
            event=event,
            fee_token=fee_token,
            token=token,
            transfer=transfer,
        )

    def _outgoing_jetton(self, event, fee_token, token, source) -> JettonOutgoingTransactionRecord:
        transfers: list[Transfer] = []
        total = Decimal(0)

        for action in self._jetton_transfers(event):
            amount = to_decimal(action.amount, token.decimals)
            value = Decimal(0)
            if not amount.is_zero():
                value = negate(amount)
                total = exact_sum(total, value)
            transfers.append(self._make_transfer(action, token, value))

        return JettonOutgoingTransactionRecord(
            source=source,
            event=event,
            fee_token=fee_token,
            token=token,
            transfers=tuple(transfers),
            total_value=TransactionValue(token=token, value=total),
            sent_to_self=event.decoration.sent_to_self,
        )

    def _jetton_transfers(self, event: AccountEvent) -> list[JettonTransfer]:
        """Jetton transfer actions with a known recipient, in event order."""
        return [a for a in event.actions if isinstance(a, JettonTransfer) and a.recipient is not None]

    def _make_transfer(self, action: JettonTransfer, token: Token, value: Decimal) -> Transfer:
        return Transfer(
            address=action.recipient.to_friendly(bounceable=self._bounceable),
            value=TransactionValue(token=token, value=value),
        )


class JettonTransactionConverter(TonTransactionConverter):
    """Converter for a single jetton wallet. Native-coin events become generic records."""

    DECORATION_HANDLERS: dict[DecorationKind, str] = {
        DecorationKind.INCOMING_JETTON: "_incoming_jetton",
        DecorationKind.OUTGOING_JETTON: "_outgoing_jetton",
    }

    def __init__(
        self,
        source: TransactionSource,
        base_token: Token,
        jetton_token: Token,
        bounceable: bool | None = None,
    ) -> None:
        super().__init__(source, base_token, bounceable)
        self._jetton_token = jetton_token

    @property
    def default_token(self) -> Token:
        return self._jetton_token


def classify(
    event: AccountEvent,
    fee_token: Token,
    transfer_token: Token,
    source: TransactionSource,
) -> TransactionRecord:
    """Build the transaction record for ``event``. Total, pure and deterministic."""
    return TonTransactionConverter(source, fee_token).classify(event, fee_token, transfer_token, source)

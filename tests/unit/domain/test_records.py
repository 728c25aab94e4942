from decimal import Decimal

import pytest
from conftest import make_address
from pydantic import ValidationError

from tonwallet.domain.enums import (
    AccountKind,
    ActionKind,
    AdapterStatus,
    DecorationKind,
    RecordType,
    SyncStatus,
    TagProtocol,
    TagType,
    TokenKind,
    TransactionTypeFilter,
)
from tonwallet.domain.models import (
    AccountEvent,
    JettonOutgoingTransactionRecord,
    JettonTransfer,
    OutgoingJettonDecoration,
    TonTransactionRecord,
    TransactionRecordAdapter,
    TransactionValue,
    Transfer,
    UnknownAction,
    UnknownDecoration,
)


class TestEnumsAreStringMixin:
    """All enums use (str, Enum) so they serialize to plain strings."""

    def test_decoration_kind(self):
        assert isinstance(DecorationKind.OUTGOING_JETTON, str)
        assert DecorationKind.OUTGOING_JETTON == "outgoing_jetton"

    def test_record_type(self):
        assert RecordType.JETTON_INCOMING == "jetton_incoming"

    def test_others(self):
        for enum_value in (
            AccountKind.MNEMONIC,
            ActionKind.JETTON_TRANSFER,
            AdapterStatus.SYNCED,
            SyncStatus.NOT_SYNCED,
            TagProtocol.JETTON,
            TagType.INCOMING,
            TokenKind.NATIVE,
            TransactionTypeFilter.ALL,
        ):
            assert isinstance(enum_value, str)


class TestAccountEvent:
    def test_from_plain_data(self):
        event = AccountEvent.model_validate({
            "event_id": "e1",
            "lt": 10,
            "decoration": {"kind": "outgoing_jetton", "sent_to_self": True},
            "actions": [
                {"kind": "jetton_transfer", "recipient": make_address(1).to_raw(), "amount": "100"},
                {"kind": "unknown", "name": "NftItemTransfer"},
            ],
        })
        assert isinstance(event.decoration, OutgoingJettonDecoration)
        assert event.decoration.sent_to_self is True
        assert isinstance(event.actions[0], JettonTransfer)
        assert event.actions[0].amount == 100
        assert isinstance(event.actions[1], UnknownAction)

    def test_default_decoration_is_unknown(self):
        assert isinstance(AccountEvent(event_id="e").decoration, UnknownDecoration)

    def test_unknown_decoration_kind_rejected(self):
        with pytest.raises(ValidationError):
            AccountEvent.model_validate({"event_id": "e", "decoration": {"kind": "swap"}})

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            JettonTransfer(recipient=None, amount=-1)

    def test_immutable(self):
        event = AccountEvent(event_id="e")
        with pytest.raises(ValidationError):
            event.lt = 5


class TestRecordUnion:
    def test_round_trip_keeps_variant(self, ton_token, jetton_token, source):
        event = AccountEvent(event_id="e1", lt=7, decoration=OutgoingJettonDecoration(sent_to_self=False))
        record = JettonOutgoingTransactionRecord(
            source=source,
            event=event,
            fee_token=ton_token,
            token=jetton_token,
            transfers=(
                Transfer(
                    address=make_address(2).to_friendly(bounceable=False),
                    value=TransactionValue(token=jetton_token, value=Decimal("-2.5")),
                ),
            ),
            total_value=TransactionValue(token=jetton_token, value=Decimal("-2.5")),
        )

        restored = TransactionRecordAdapter.validate_json(TransactionRecordAdapter.dump_json(record))

        assert isinstance(restored, JettonOutgoingTransactionRecord)
        assert restored.model_dump() == record.model_dump()
        assert restored.main_value.value == Decimal("-2.5")

    def test_generic_record_has_no_main_value(self, ton_token, source):
        record = TonTransactionRecord(source=source, event=AccountEvent(event_id="x"), fee_token=ton_token)
        assert record.main_value is None
        assert record.record_type == RecordType.TON

    def test_transaction_value_is_zero(self, ton_token):
        assert TransactionValue(token=ton_token, value=Decimal("0.00")).is_zero
        assert not TransactionValue(token=ton_token, value=Decimal("-1")).is_zero

"""TonTransactionsAdapter: lists and converts account events for the wallet's transaction views."""

import logging
from collections.abc import Callable

from tonwallet.adapters.base import TonKit
from tonwallet.adapters.ton import TonAdapter
from tonwallet.config import settings
from tonwallet.converter.transaction import TonTransactionConverter
from tonwallet.domain.enums import TagProtocol, TagType, TokenKind, TransactionTypeFilter
from tonwallet.domain.models.address import Address
from tonwallet.domain.models.kit import TransactionTagQuery
from tonwallet.domain.models.records import BaseTransactionRecord, TransactionRecord
from tonwallet.domain.models.token import Token, TransactionSource
from tonwallet.exceptions import AddressError

logger = logging.getLogger(__name__)

FILTER_TAG_TYPES: dict[TransactionTypeFilter, TagType | None] = {
    TransactionTypeFilter.ALL: None,
    TransactionTypeFilter.INCOMING: TagType.INCOMING,
    TransactionTypeFilter.OUTGOING: TagType.OUTGOING,
    TransactionTypeFilter.SWAP: TagType.SWAP,
    TransactionTypeFilter.APPROVE: TagType.APPROVE,
}


def raw_address_or_none(address: str | None) -> str | None:
    """Raw form of a user-supplied address; None when absent or unparseable."""
    if not address:
        return None
    try:
        return Address.parse(address).to_raw()
    except AddressError:
        logger.warning("Ignoring unparseable address filter %r", address)
        return None


class TonTransactionsAdapter(TonAdapter):
    def __init__(
        self,
        kit: TonKit,
        source: TransactionSource,
        base_token: Token,
        is_reachable: Callable[[], bool] | None = None,
        bounceable: bool | None = None,
    ) -> None:
        super().__init__(kit, base_token, is_reachable, bounceable)
        self._source = source
        self._converter = TonTransactionConverter(source, base_token, bounceable)

    @property
    def explorer_title(self) -> str:
        return settings.explorer_title

    def explorer_url(self, transaction_hash: str) -> str:
        return settings.explorer_url_template.format(hash=transaction_hash)

    def tag_query(
        self,
        token: Token | None,
        type_filter: TransactionTypeFilter,
        address: str | None,
    ) -> TransactionTagQuery:
        protocol = None
        jetton_address = None

        if token is not None:
            if token.type.kind == TokenKind.NATIVE:
                protocol = TagProtocol.NATIVE
            elif token.type.kind == TokenKind.JETTON and token.type.address:
                try:
                    jetton_address = Address.parse(token.type.address)
                    protocol = TagProtocol.JETTON
                except AddressError:
                    logger.warning("Token %s has unparseable jetton address", token.coin_code)

        return TransactionTagQuery(
            type=FILTER_TAG_TYPES[type_filter],
            protocol=protocol,
            jetton_address=jetton_address,
            address=address,
        )

    def transactions(
        self,
        from_record: BaseTransactionRecord | None = None,
        token: Token | None = None,
        type_filter: TransactionTypeFilter = TransactionTypeFilter.ALL,
        address: str | None = None,
        limit: int | None = None,
    ) -> list[TransactionRecord]:
        """One page of records, newest first, older than ``from_record`` when given."""
        query = self.tag_query(token, type_filter, raw_address_or_none(address))
        before_lt = from_record.lt if from_record is not None else None
        events = self._kit.transactions(
            tag_queries=[query],
            before_lt=before_lt,
            limit=limit or settings.transactions_page_limit,
        )
        records = [self._converter.transaction_record(event, token) for event in events]
        logger.debug("TonTransactionsAdapter: %d transactions before lt=%s", len(records), before_lt)
        return records

    def transaction_records(self, events) -> list[TransactionRecord]:
        """Convert events pushed by the kit, preserving their delivery order."""
        return [self._converter.transaction_record(event) for event in events]

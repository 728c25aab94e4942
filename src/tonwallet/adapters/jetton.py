"""JettonAdapter: balance, history and sending for one jetton held by a TON wallet."""

import logging
from collections.abc import Callable, Iterable
from decimal import Decimal

from tonwallet.adapters.base import BalanceData, BaseTonAdapter, TonKit
from tonwallet.adapters.transactions import FILTER_TAG_TYPES
from tonwallet.converter.amount import to_decimal, to_raw
from tonwallet.converter.transaction import JettonTransactionConverter
from tonwallet.domain.enums import TagProtocol, TokenKind, TransactionTypeFilter
from tonwallet.domain.models.address import Address
from tonwallet.domain.models.kit import AccountEvent, Jetton, TransactionTagQuery
from tonwallet.domain.models.records import TransactionRecord
from tonwallet.domain.models.token import Token, Wallet
from tonwallet.exceptions import AddressError, JettonNotFoundError, WrongJettonAddressError, WrongTokenTypeError

logger = logging.getLogger(__name__)


class JettonAdapter(BaseTonAdapter):
    """Adapter for a jetton wallet.

    Construction fails with WrongTokenTypeError when the wallet token is not a
    jetton and with WrongJettonAddressError when its master address does not parse.
    Fees are paid in the base (native) token.
    """

    def __init__(
        self,
        kit: TonKit,
        wallet: Wallet,
        base_token: Token,
        is_reachable: Callable[[], bool] | None = None,
        bounceable: bool | None = None,
    ) -> None:
        token = wallet.token
        if token.type.kind != TokenKind.JETTON:
            raise WrongTokenTypeError(f"Expected a jetton token, got {token.type.kind.value}")
        try:
            self._jetton_address = Address.parse(token.type.address or "")
        except AddressError as exc:
            raise WrongJettonAddressError(f"Invalid jetton address for {token.coin_code}: {exc}") from exc

        super().__init__(kit, is_reachable, bounceable)
        self._jetton_token = token
        self._base_token = base_token
        self._converter = JettonTransactionConverter(
            wallet.transaction_source, base_token, token, bounceable=self._bounceable
        )

    @property
    def jetton_address(self) -> Address:
        return self._jetton_address

    @property
    def token(self) -> Token:
        return self._jetton_token

    @property
    def balance_data(self) -> BalanceData:
        raw = self._kit.jetton_balance(self._jetton_address)
        return BalanceData(available=to_decimal(raw, self._jetton_token.decimals))

    @property
    def available_balance(self) -> Decimal:
        return self.balance_data.available

    def transaction_records(self, events: Iterable[AccountEvent]) -> list[TransactionRecord]:
        return [self._converter.transaction_record(event) for event in events]

    def tag_query(self, type_filter: TransactionTypeFilter, address: str | None) -> TransactionTagQuery:
        return TransactionTagQuery(
            type=FILTER_TAG_TYPES[type_filter],
            protocol=TagProtocol.JETTON,
            jetton_address=self._jetton_address,
            address=address,
        )

    def _jetton(self) -> Jetton:
        for jetton in self._kit.jettons:
            if jetton.address == self._jetton_address:
                return jetton
        raise JettonNotFoundError(f"Kit has no jetton {self._jetton_address.to_raw()}")

    async def estimate_fee(self, recipient: str, amount: Decimal, memo: str | None = None) -> Decimal:
        jetton = self._jetton()
        raw_amount = to_raw(amount, self._jetton_token.decimals)
        fee = await self._kit.estimate_fee(recipient=recipient, amount=raw_amount, comment=memo, jetton=jetton)
        return to_decimal(fee, self._base_token.decimals)

    async def send(self, recipient: str, amount: Decimal, memo: str | None = None) -> None:
        jetton = self._jetton()
        raw_amount = to_raw(amount, self._jetton_token.decimals)
        logger.info("Sending %s %s to %s", amount, self._jetton_token.coin_code, recipient)
        await self._kit.send(recipient=recipient, amount=raw_amount, comment=memo, jetton=jetton)

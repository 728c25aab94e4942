"""TonAdapter: balance and sending for the native TON coin."""

import logging
from collections.abc import Callable
from decimal import Decimal

from tonwallet.adapters.base import BalanceData, BaseTonAdapter, TonKit
from tonwallet.converter.amount import to_decimal, to_raw
from tonwallet.domain.models.token import Token
from tonwallet.exceptions import WrongTokenTypeError

logger = logging.getLogger(__name__)


class TonAdapter(BaseTonAdapter):
    def __init__(
        self,
        kit: TonKit,
        token: Token,
        is_reachable: Callable[[], bool] | None = None,
        bounceable: bool | None = None,
    ) -> None:
        if not token.is_native:
            raise WrongTokenTypeError(f"TonAdapter needs the native token, got {token.type.kind.value}")
        super().__init__(kit, is_reachable, bounceable)
        self._token = token

    @property
    def token(self) -> Token:
        return self._token

    @property
    def balance_data(self) -> BalanceData:
        return BalanceData(available=to_decimal(self._kit.balance, self._token.decimals))

    @property
    def available_balance(self) -> Decimal:
        return self.balance_data.available

    async def estimate_fee(self, recipient: str, amount: Decimal, memo: str | None = None) -> Decimal:
        raw_amount = to_raw(amount, self._token.decimals)
        fee = await self._kit.estimate_fee(recipient=recipient, amount=raw_amount, comment=memo)
        return to_decimal(fee, self._token.decimals)

    async def send(self, recipient: str, amount: Decimal, memo: str | None = None) -> None:
        raw_amount = to_raw(amount, self._token.decimals)
        logger.info("Sending %s %s to %s", amount, self._token.coin_code, recipient)
        await self._kit.send(recipient=recipient, amount=raw_amount, comment=memo)

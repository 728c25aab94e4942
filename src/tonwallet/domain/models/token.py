"""Wallet-side token, wallet and account types."""

from pydantic import BaseModel, ConfigDict

from tonwallet.domain.enums import AccountKind, BlockchainType, TokenKind


class TokenType(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind = TokenKind.NATIVE
    address: str | None = None  # jetton master address, user-friendly form

    @classmethod
    def native(cls) -> "TokenType":
        return cls(kind=TokenKind.NATIVE)

    @classmethod
    def jetton(cls, address: str) -> "TokenType":
        return cls(kind=TokenKind.JETTON, address=address)


class Token(BaseModel):
    """A fungible asset the wallet can hold. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    blockchain_type: BlockchainType = BlockchainType.TON
    type: TokenType = TokenType()
    coin_code: str  # symbol, e.g. "TON", "USDT"
    coin_name: str = ""
    decimals: int
    image_url: str | None = None

    @property
    def is_native(self) -> bool:
        return self.type.kind == TokenKind.NATIVE


class TransactionSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    blockchain_type: BlockchainType = BlockchainType.TON
    meta: str | None = None


class Account(BaseModel):
    """A wallet account. ``seed`` is set for mnemonic accounts, ``address`` for watch-only ones."""

    model_config = ConfigDict(frozen=True)

    id: str
    kind: AccountKind
    seed: bytes | None = None
    address: str | None = None


class Wallet(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: Token
    account: Account

    @property
    def transaction_source(self) -> TransactionSource:
        return TransactionSource(blockchain_type=self.token.blockchain_type)

"""Exception hierarchy for the TON wallet integration layer."""


class TonWalletError(Exception):
    """Base for all tonwallet errors."""


class AmountError(TonWalletError):
    pass


class AmountPrecisionError(AmountError):
    """Decimal amount cannot be represented exactly in on-chain units."""


class AddressError(TonWalletError):
    """Malformed raw or user-friendly TON address."""


class AdapterError(TonWalletError):
    """Caller-precondition violation while building or using an adapter."""


class WrongTokenTypeError(AdapterError):
    pass


class WrongJettonAddressError(AdapterError):
    pass


class JettonNotFoundError(AdapterError):
    """The kit does not track the jetton this adapter was built for."""


class WrongAddressError(AdapterError):
    pass


class UnsupportedAccountError(AdapterError):
    pass


class MnemonicNoSeedError(AdapterError):
    pass

from tonwallet.converter.amount import to_decimal, to_raw
from tonwallet.converter.transaction import JettonTransactionConverter, TonTransactionConverter, classify

__all__ = ["JettonTransactionConverter", "TonTransactionConverter", "classify", "to_decimal", "to_raw"]

from tonwallet.adapters.base import AdapterState, BalanceData, TonKit, adapter_state
from tonwallet.adapters.jetton import JettonAdapter
from tonwallet.adapters.ton import TonAdapter
from tonwallet.adapters.transactions import TonTransactionsAdapter

__all__ = [
    "AdapterState",
    "BalanceData",
    "JettonAdapter",
    "TonAdapter",
    "TonKit",
    "TonTransactionsAdapter",
    "adapter_state",
]

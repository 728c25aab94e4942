from enum import Enum


class BlockchainType(str, Enum):
    """Blockchains a transaction source can belong to. Only TON is handled here."""

    TON = "ton"


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

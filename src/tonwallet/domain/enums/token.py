from enum import Enum


class TokenKind(str, Enum):
    """Shape of a token: the chain's native coin or a jetton contract."""

    NATIVE = "native"
    JETTON = "jetton"

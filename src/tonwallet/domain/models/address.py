"""TON account addresses: raw (``wc:hex``) and user-friendly (base64) forms.

Encoding, checksums and flag tags are handled by ``pytoniq_core``; this module
wraps it as a frozen pydantic value so addresses can sit in model fields, and
maps library failures onto ``AddressError``.
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator, model_serializer, model_validator
from pytoniq_core.boc.address import Address as TonAddress
from pytoniq_core.boc.address import AddressError as TonAddressError

from tonwallet.exceptions import AddressError

_RAW_RE = re.compile(r"^(-?\d+):([0-9a-fA-F]{64})$")
_FRIENDLY_RE = re.compile(r"^[A-Za-z0-9+/_-]{48}$")


def _ton_address(value: str) -> TonAddress:
    try:
        return TonAddress(value)
    except (TonAddressError, ValueError) as exc:
        raise AddressError(f"Invalid address {value!r}: {exc}") from exc


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    workchain: int = 0
    hash_part: bytes

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data):
        if isinstance(data, str):
            try:
                parsed = cls.parse(data)
            except AddressError as exc:
                raise ValueError(str(exc)) from exc
            return {"workchain": parsed.workchain, "hash_part": parsed.hash_part}
        return data

    @field_validator("hash_part")
    @classmethod
    def _check_hash_length(cls, value: bytes) -> bytes:
        if len(value) != 32:
            raise ValueError("account hash must be 32 bytes")
        return value

    @model_serializer
    def _serialize(self) -> str:
        return self.to_raw()

    @classmethod
    def parse(cls, value: str) -> "Address":
        """Parse either address form. Raises AddressError on malformed input."""
        value = value.strip()
        if ":" in value:
            return cls.parse_raw_form(value)
        return FriendlyAddress.parse(value).address

    @classmethod
    def parse_raw_form(cls, value: str) -> "Address":
        value = value.strip()
        match = _RAW_RE.match(value)
        if match is None:
            raise AddressError(f"Invalid raw address: {value!r}")
        workchain = int(match.group(1))
        if not -128 <= workchain <= 127:
            raise AddressError(f"Workchain out of range: {workchain}")
        return cls.from_ton(_ton_address(value))

    @classmethod
    def from_ton(cls, address: TonAddress) -> "Address":
        return cls(workchain=address.wc, hash_part=address.hash_part)

    def to_ton(self) -> TonAddress:
        return TonAddress((self.workchain, self.hash_part))

    def to_raw(self) -> str:
        return self.to_ton().to_str(is_user_friendly=False)

    def to_friendly(self, bounceable: bool, testnet: bool = False, url_safe: bool = True) -> str:
        return self.to_ton().to_str(
            is_user_friendly=True,
            is_url_safe=url_safe,
            is_bounceable=bounceable,
            is_test_only=testnet,
        )

    def __str__(self) -> str:
        return self.to_raw()


class FriendlyAddress(BaseModel):
    """A decoded user-friendly address with its flags."""

    model_config = ConfigDict(frozen=True)

    address: Address
    bounceable: bool
    testnet: bool = False

    @classmethod
    def parse(cls, value: str) -> "FriendlyAddress":
        if _FRIENDLY_RE.match(value) is None:
            raise AddressError(f"Invalid friendly address: {value!r}")
        # the library decodes the standard base64 alphabet
        parsed = _ton_address(value.replace("-", "+").replace("_", "/"))
        return cls(
            address=Address.from_ton(parsed),
            bounceable=bool(parsed.is_bounceable),
            testnet=bool(parsed.is_test_only),
        )

    def to_string(self) -> str:
        return self.address.to_friendly(self.bounceable, self.testnet)

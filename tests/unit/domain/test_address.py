import pytest
from conftest import make_address
from pydantic import ValidationError
from pytoniq_core import Address as TonAddress

from tonwallet.domain.models import Address, FriendlyAddress, JettonTransfer
from tonwallet.exceptions import AddressError

ZERO_RAW = "0:" + "00" * 32
ZERO_BOUNCEABLE = "EQAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAM9c"


class TestRawForm:
    def test_parse_and_format(self):
        addr = Address.parse(ZERO_RAW)
        assert addr.workchain == 0
        assert addr.hash_part == bytes(32)
        assert addr.to_raw() == ZERO_RAW

    def test_masterchain(self):
        raw = "-1:" + "ab" * 32
        addr = Address.parse(raw)
        assert addr.workchain == -1
        assert addr.to_raw() == raw

    def test_uppercase_hex(self):
        addr = Address.parse("0:" + "AB" * 32)
        assert addr.hash_part == bytes([0xAB]) * 32

    def test_short_hash_rejected(self):
        with pytest.raises(AddressError):
            Address.parse("0:abcd")

    def test_workchain_out_of_range(self):
        with pytest.raises(AddressError):
            Address.parse("300:" + "00" * 32)


class TestFriendlyForm:
    def test_known_zero_address(self):
        assert Address.parse(ZERO_RAW).to_friendly(bounceable=True) == ZERO_BOUNCEABLE

    def test_parse_known_zero_address(self):
        friendly = FriendlyAddress.parse(ZERO_BOUNCEABLE)
        assert friendly.bounceable is True
        assert friendly.testnet is False
        assert friendly.address.to_raw() == ZERO_RAW

    def test_length_is_48(self):
        assert len(make_address(0x11).to_friendly(bounceable=False)) == 48

    def test_round_trip_flags(self):
        addr = make_address(0x42, workchain=-1)
        for bounceable in (True, False):
            for testnet in (True, False):
                friendly = FriendlyAddress.parse(addr.to_friendly(bounceable, testnet))
                assert friendly.address == addr
                assert friendly.bounceable is bounceable
                assert friendly.testnet is testnet

    def test_standard_and_url_safe_alphabets(self):
        addr = make_address(0xFB)
        url_safe = addr.to_friendly(bounceable=True)
        standard = addr.to_friendly(bounceable=True, url_safe=False)
        assert Address.parse(url_safe) == Address.parse(standard) == addr

    def test_bounceable_prefix(self):
        addr = make_address(0x00)
        assert addr.to_friendly(bounceable=True).startswith("EQ")
        assert addr.to_friendly(bounceable=False).startswith("UQ")

    def test_bad_checksum_rejected(self):
        corrupted = ZERO_BOUNCEABLE[:-1] + ("d" if ZERO_BOUNCEABLE[-1] != "d" else "e")
        with pytest.raises(AddressError):
            Address.parse(corrupted)

    def test_bad_length_rejected(self):
        with pytest.raises(AddressError):
            Address.parse(ZERO_BOUNCEABLE[:-4])

    def test_not_base64_rejected(self):
        with pytest.raises(AddressError):
            Address.parse("!" * 48)


class TestModelIntegration:
    def test_field_accepts_string(self):
        transfer = JettonTransfer(recipient=ZERO_BOUNCEABLE, amount=1)
        assert transfer.recipient == Address.parse(ZERO_RAW)

    def test_invalid_string_is_validation_error(self):
        with pytest.raises(ValidationError):
            JettonTransfer(recipient="garbage", amount=1)

    def test_serializes_to_raw(self):
        transfer = JettonTransfer(recipient=ZERO_RAW, amount=1)
        assert transfer.model_dump()["recipient"] == ZERO_RAW

    def test_hash_length_validated(self):
        with pytest.raises(ValidationError):
            Address(workchain=0, hash_part=b"\x00" * 31)


class TestLibraryInterop:
    def test_friendly_matches_pytoniq(self):
        raw = "0:" + "ab" * 32
        expected = TonAddress(raw).to_str(is_user_friendly=True, is_bounceable=False, is_url_safe=True)
        assert Address.parse(raw).to_friendly(bounceable=False) == expected

    def test_round_trip_through_library(self):
        addr = make_address(0x5C, workchain=-1)
        assert Address.from_ton(addr.to_ton()) == addr
        assert addr.to_ton().to_str(is_user_friendly=False) == addr.to_raw()

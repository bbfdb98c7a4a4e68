import pytest

from mhda.errors import ErrorCode, ParseError
from mhda.types import (
    Algorithm,
    Coin,
    DerivationType,
    Format,
    NetworkType,
    algorithm_from_string,
    derivation_type_from_string,
    format_from_string,
    network_type_from_string,
)


def test_network_type_from_string_is_case_insensitive():
    assert network_type_from_string("xrp") == NetworkType.XRP_LEDGER
    assert network_type_from_string("  XRP  ") == NetworkType.XRP_LEDGER
    assert network_type_from_string("xxx") is None


def test_algorithm_helpers():
    assert Algorithm.SECP256K1.is_valid()
    assert Algorithm.ED25519.is_valid()
    assert not Algorithm("rsa").is_valid()
    assert str(Algorithm.SECP256K1) == "secp256k1"
    assert algorithm_from_string("  ED25519  ") == Algorithm.ED25519
    assert algorithm_from_string("nope") is None


def test_format_helpers():
    assert Format.P2TR.is_valid()
    assert Format.BECH32M.is_valid()
    assert not Format("zzz").is_valid()
    assert str(Format.BECH32M) == "bech32m"
    assert format_from_string("  P2TR  ") == Format.P2TR


def test_derivation_type_helpers():
    assert DerivationType.BIP44.is_valid()
    assert DerivationType.SLIP10.is_valid()
    assert DerivationType.ROOT.is_valid()
    assert not DerivationType("zip999").is_valid()
    assert str(DerivationType.BIP86) == "bip86"
    assert derivation_type_from_string("  CIP1852  ") == DerivationType.CIP1852


def test_derivation_type_from_string_rejects_unknown():
    with pytest.raises(ParseError) as info:
        derivation_type_from_string("nope")
    assert info.value.code is ErrorCode.INVALID_DERIVATION_TYPE


def test_default_network_type_is_empty_and_invalid():
    nt = NetworkType()
    assert not nt
    assert not nt.is_valid()
    assert str(nt) == ""


def test_default_algorithm_and_format_are_empty():
    assert not Algorithm()
    assert not Algorithm().is_valid()
    assert not Format()
    assert not Format().is_valid()


def test_default_derivation_type_is_not_root():
    dt = DerivationType()
    assert not dt
    assert not dt.is_valid()
    assert dt != DerivationType.ROOT


@pytest.mark.parametrize(
    "name, member",
    [
        ("btc", NetworkType.BITCOIN),
        ("evm", NetworkType.ETHEREUM_VM),
        ("avm", NetworkType.AVALANCHE_VM),
        ("tvm", NetworkType.TRON_VM),
        ("cosmos", NetworkType.COSMOS),
        ("sol", NetworkType.SOLANA),
        ("xrp", NetworkType.XRP_LEDGER),
        ("xlm", NetworkType.STELLAR),
        ("near", NetworkType.NEAR_PROTOCOL),
        ("apt", NetworkType.APTOS),
        ("sui", NetworkType.SUI),
        ("ada", NetworkType.CARDANO),
        ("algo", NetworkType.ALGORAND),
        ("ton", NetworkType.TONCOIN),
    ],
)
def test_every_registered_network_resolves(name, member):
    assert network_type_from_string(name.upper()) == member
    assert member.is_valid()


def test_unregistered_network_value_is_invalid():
    assert not NetworkType("polkadot").is_valid()


def test_types_with_same_text_are_not_equal_across_kinds():
    assert Algorithm("hex") != Format("hex")
    assert Format.HEX == Format("hex")


def test_values_are_hashable_and_deduplicate():
    assert len({Format.HEX, Format("hex"), Format.BECH32}) == 2


def test_coin_constants():
    assert Coin.ETH == 60
    assert Coin.BTC == 0
    assert Coin.SOL == 501
    assert Coin.ADA == 1815
    assert Coin.AVAX == 9000
    assert Coin(60) is Coin.ETH


def test_every_algorithm_and_format_constant_round_trips():
    for member in (Algorithm.SR25519, Algorithm.PRIME256V1, Algorithm.SECP521R1):
        assert algorithm_from_string(str(member)) == member
    for member in (Format.SS58, Format.BASE64URL, Format.STRKEY):
        assert format_from_string(str(member).upper()) == member


def test_all_derivation_constants_parse_back():
    for member in (
        DerivationType.ROOT, DerivationType.BIP32, DerivationType.BIP44,
        DerivationType.BIP49, DerivationType.BIP54, DerivationType.BIP74,
        DerivationType.BIP84, DerivationType.BIP86, DerivationType.SLIP10,
        DerivationType.CIP1852, DerivationType.CIP11, DerivationType.ZIP32,
    ):
        assert derivation_type_from_string(str(member)) == member
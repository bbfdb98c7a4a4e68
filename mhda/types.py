"""Named value types: networks, algorithms, formats, derivation schemes, coins."""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, FrozenSet, Optional

from .errors import ErrorCode, ParseError
from .text import normalize


class Coin(IntEnum):
    """Pre-registered SLIP-44 coin types."""

    BTC = 0
    LTC = 2
    DOGE = 3
    DASH = 5
    ETH = 60
    XMR = 128
    ZEC = 133
    XRP = 144
    XLM = 148
    ATOM = 168
    TRX = 195
    ALGO = 283
    NEAR = 397
    SOL = 501
    TON = 607
    APT = 637
    BNB = 714
    SUI = 784
    MATIC = 966
    GLMR = 1284
    ADA = 1815
    AVAX = 9000
    BSC = 9006


@dataclass(frozen=True, order=True)
class _Name:
    """A canonical lowercase identifier; the empty value means unset."""

    value: str = ""

    _KNOWN: ClassVar[FrozenSet[str]] = frozenset()

    def __str__(self):
        return self.value

    def __bool__(self):
        return bool(self.value)

    def _is_known(self):
        return self.value in self._KNOWN


class NetworkType(_Name):
    """A registered network identifier such as ``evm``, ``btc`` or ``sol``."""

    _KNOWN = frozenset(
        {
            "btc", "evm", "avm", "tvm", "cosmos", "sol", "xrp",
            "xlm", "near", "apt", "sui", "ada", "algo", "ton",
        }
    )

    def is_valid(self):
        """Report whether the value is a registered network identifier."""
        return self._is_known()


NetworkType.BITCOIN = NetworkType("btc")
NetworkType.ETHEREUM_VM = NetworkType("evm")
NetworkType.AVALANCHE_VM = NetworkType("avm")
NetworkType.TRON_VM = NetworkType("tvm")
NetworkType.COSMOS = NetworkType("cosmos")
NetworkType.SOLANA = NetworkType("sol")
NetworkType.XRP_LEDGER = NetworkType("xrp")
NetworkType.STELLAR = NetworkType("xlm")
NetworkType.NEAR_PROTOCOL = NetworkType("near")
NetworkType.APTOS = NetworkType("apt")
NetworkType.SUI = NetworkType("sui")
NetworkType.CARDANO = NetworkType("ada")
NetworkType.ALGORAND = NetworkType("algo")
NetworkType.TONCOIN = NetworkType("ton")


class Algorithm(_Name):
    """A signature curve or scheme such as ``secp256k1`` or ``ed25519``."""

    _KNOWN = frozenset(
        {
            "secp256k1", "ed25519", "sr25519",
            "secp256r1", "secp384r1", "secp521r1", "prime256v1",
        }
    )

    def is_valid(self):
        """Report whether the value is a registered algorithm."""
        return self._is_known()


Algorithm.SECP256K1 = Algorithm("secp256k1")
Algorithm.ED25519 = Algorithm("ed25519")
Algorithm.SR25519 = Algorithm("sr25519")
Algorithm.SECP256R1 = Algorithm("secp256r1")
Algorithm.SECP384R1 = Algorithm("secp384r1")
Algorithm.SECP521R1 = Algorithm("secp521r1")
Algorithm.PRIME256V1 = Algorithm("prime256v1")


class Format(_Name):
    """A serialised address encoding such as ``hex`` or ``bech32``."""

    _KNOWN = frozenset(
        {
            "hex", "p2pkh", "p2sh", "p2wpkh", "p2wsh", "p2tr",
            "bech32", "bech32m", "base58", "base32", "strkey",
            "base64url", "ss58",
        }
    )

    def is_valid(self):
        """Report whether the value is a registered address format."""
        return self._is_known()


Format.HEX = Format("hex")
Format.P2PKH = Format("p2pkh")
Format.P2SH = Format("p2sh")
Format.P2WPKH = Format("p2wpkh")
Format.P2WSH = Format("p2wsh")
Format.P2TR = Format("p2tr")
Format.BECH32 = Format("bech32")
Format.BECH32M = Format("bech32m")
Format.BASE58 = Format("base58")
Format.BASE32 = Format("base32")
Format.STRKEY = Format("strkey")
Format.BASE64URL = Format("base64url")
Format.SS58 = Format("ss58")


class DerivationType(_Name):
    """A derivation path scheme; ``root`` is the non-HD form with no path."""

    _KNOWN = frozenset(
        {
            "root", "bip32", "bip44", "bip49", "bip54", "bip74",
            "bip84", "bip86", "slip10", "cip1852", "cip11", "zip32",
        }
    )

    def is_valid(self):
        """Report whether the value is a registered derivation scheme."""
        return self._is_known()


DerivationType.ROOT = DerivationType("root")
DerivationType.BIP32 = DerivationType("bip32")
DerivationType.BIP44 = DerivationType("bip44")
DerivationType.BIP49 = DerivationType("bip49")
DerivationType.BIP54 = DerivationType("bip54")
DerivationType.BIP74 = DerivationType("bip74")
DerivationType.BIP84 = DerivationType("bip84")
DerivationType.BIP86 = DerivationType("bip86")
DerivationType.SLIP10 = DerivationType("slip10")
DerivationType.CIP1852 = DerivationType("cip1852")
DerivationType.CIP11 = DerivationType("cip11")
DerivationType.ZIP32 = DerivationType("zip32")


def _lookup(cls, s) -> Optional[_Name]:
    candidate = cls(normalize(s))
    return candidate if candidate.is_valid() else None


def network_type_from_string(s):
    """Look up a network type, ignoring case and surrounding whitespace.

    Returns None for unknown values.
    """
    return _lookup(NetworkType, s)


def algorithm_from_string(s):
    """Look up an algorithm, ignoring case and surrounding whitespace.

    Returns None for unknown values.
    """
    return _lookup(Algorithm, s)


def format_from_string(s):
    """Look up a format, ignoring case and surrounding whitespace.

    Returns None for unknown values.
    """
    return _lookup(Format, s)


def derivation_type_from_string(s):
    """Look up a derivation type, ignoring case and surrounding whitespace.

    Raises ParseError with INVALID_DERIVATION_TYPE for unknown values.
    """
    found = _lookup(DerivationType, s)
    if found is None:
        raise ParseError(ErrorCode.INVALID_DERIVATION_TYPE, f'"{s}"')
    return found
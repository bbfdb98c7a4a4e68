"""Per-network compatibility matrix of algorithms, formats and derivations."""

from dataclasses import dataclass
from types import MappingProxyType

from .types import Algorithm, DerivationType, Format, NetworkType


@dataclass(frozen=True)
class NetworkCompat:
    """Allowed algorithms, formats and derivations of one network, with defaults."""

    algorithms: frozenset
    formats: frozenset
    derivations: frozenset
    default_algorithm: Algorithm = Algorithm()
    default_format: Format = Format()


def _compat(algorithms, formats, derivations, default_algorithm, default_format=Format()):
    return NetworkCompat(
        frozenset(algorithms),
        frozenset(formats),
        frozenset(derivations),
        default_algorithm,
        default_format,
    )


_MATRIX = MappingProxyType(
    {
        # No default format: several legitimate script types.
        NetworkType.BITCOIN: _compat(
            {Algorithm.SECP256K1},
            {
                Format.P2PKH, Format.P2SH, Format.P2WPKH, Format.P2WSH,
                Format.P2TR, Format.BECH32, Format.BECH32M,
            },
            {
                DerivationType.BIP32, DerivationType.BIP44, DerivationType.BIP49,
                DerivationType.BIP84, DerivationType.BIP86,
            },
            Algorithm.SECP256K1,
        ),
        NetworkType.ETHEREUM_VM: _compat(
            {Algorithm.SECP256K1},
            {Format.HEX},
            {DerivationType.BIP32, DerivationType.BIP44},
            Algorithm.SECP256K1,
            Format.HEX,
        ),
        # No default format: C-Chain uses hex, X/P-Chain bech32.
        NetworkType.AVALANCHE_VM: _compat(
            {Algorithm.SECP256K1},
            {Format.HEX, Format.BECH32},
            {DerivationType.BIP44},
            Algorithm.SECP256K1,
        ),
        NetworkType.TRON_VM: _compat(
            {Algorithm.SECP256K1},
            {Format.BASE58},
            {DerivationType.BIP44},
            Algorithm.SECP256K1,
            Format.BASE58,
        ),
        NetworkType.COSMOS: _compat(
            {Algorithm.SECP256K1, Algorithm.ED25519},
            {Format.BECH32},
            {DerivationType.BIP44, DerivationType.CIP11},
            Algorithm.SECP256K1,
            Format.BECH32,
        ),
        NetworkType.SOLANA: _compat(
            {Algorithm.ED25519},
            {Format.BASE58},
            {DerivationType.SLIP10},
            Algorithm.ED25519,
            Format.BASE58,
        ),
        NetworkType.XRP_LEDGER: _compat(
            {Algorithm.SECP256K1, Algorithm.ED25519},
            {Format.BASE58},
            {DerivationType.BIP44},
            Algorithm.SECP256K1,
            Format.BASE58,
        ),
        NetworkType.STELLAR: _compat(
            {Algorithm.ED25519},
            {Format.STRKEY},
            {DerivationType.SLIP10},
            Algorithm.ED25519,
            Format.STRKEY,
        ),
        NetworkType.NEAR_PROTOCOL: _compat(
            {Algorithm.ED25519, Algorithm.SECP256K1},
            {Format.HEX},
            {DerivationType.SLIP10, DerivationType.BIP44},
            Algorithm.ED25519,
            Format.HEX,
        ),
        NetworkType.APTOS: _compat(
            {Algorithm.ED25519, Algorithm.SECP256K1},
            {Format.HEX},
            {DerivationType.SLIP10, DerivationType.BIP44},
            Algorithm.ED25519,
            Format.HEX,
        ),
        NetworkType.SUI: _compat(
            {Algorithm.ED25519, Algorithm.SECP256K1, Algorithm.SECP256R1},
            {Format.HEX},
            {DerivationType.SLIP10, DerivationType.BIP54, DerivationType.BIP74},
            Algorithm.ED25519,
            Format.HEX,
        ),
        NetworkType.CARDANO: _compat(
            {Algorithm.ED25519},
            {Format.BECH32, Format.BASE58},
            {DerivationType.CIP1852},
            Algorithm.ED25519,
            Format.BECH32,
        ),
        NetworkType.ALGORAND: _compat(
            {Algorithm.ED25519},
            {Format.BASE32},
            {DerivationType.SLIP10},
            Algorithm.ED25519,
            Format.BASE32,
        ),
        NetworkType.TONCOIN: _compat(
            {Algorithm.ED25519},
            {Format.BASE64URL, Format.HEX},
            {DerivationType.SLIP10},
            Algorithm.ED25519,
            Format.BASE64URL,
        ),
    }
)


def default_algorithm(nt):
    """Return the network's default algorithm, or an empty one if unknown."""
    entry = _MATRIX.get(nt)
    return entry.default_algorithm if entry else Algorithm()


def default_format(nt):
    """Return the network's default format, or an empty one if unknown or unset."""
    entry = _MATRIX.get(nt)
    return entry.default_format if entry else Format()


def network_is_registered(nt):
    """Report whether the network appears in the compatibility matrix."""
    return nt in _MATRIX


def network_allows_algorithm(nt, algo):
    """Report whether ``algo`` is a registered algorithm for ``nt``."""
    entry = _MATRIX.get(nt)
    return entry is not None and algo in entry.algorithms


def network_allows_format(nt, fmt):
    """Report whether ``fmt`` is a registered address format for ``nt``."""
    entry = _MATRIX.get(nt)
    return entry is not None and fmt in entry.formats


def network_allows_derivation(nt, dt):
    """Report whether ``dt`` is allowed for ``nt``; root is allowed everywhere registered."""
    entry = _MATRIX.get(nt)
    if entry is None:
        return False
    return dt == DerivationType.ROOT or dt in entry.derivations
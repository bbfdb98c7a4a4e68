"""The chain-domain triple (network, coin type, chain id) of an MHDA address."""

from dataclasses import dataclass, field

from .errors import ErrorCode, ParseError
from .nss import COMP_CHAIN_ID, COMP_COIN_TYPE, COMP_NETWORK_TYPE, parse_nss_map
from .text import normalize, parse_uint32, trim
from .types import NetworkType


@dataclass
class Chain:
    """The ``nt``/``ct``/``ci`` triple identifying a chain.

    The chain id is opaque: any non-empty NSS-safe value is accepted.
    """

    network: NetworkType = field(default_factory=NetworkType)
    coin: int = 0
    chain_id: str = ""

    def __post_init__(self):
        if not isinstance(self.network, NetworkType):
            self.network = NetworkType(str(self.network))
        self.coin = int(self.coin)

    @classmethod
    def from_nss(cls, nss):
        """Read the chain components from an NSS string, ignoring any others."""
        components = parse_nss_map(nss)
        if COMP_NETWORK_TYPE not in components:
            raise ParseError(ErrorCode.MISSING_NETWORK_TYPE)
        return build_chain_from_components(components)

    @classmethod
    def from_key(cls, key):
        """Parse a chain key as produced by :meth:`key`."""
        return cls.from_nss(key)

    def key(self):
        """Return the canonical ``nt:<network>:ct:<coin>:ci:<id>`` key."""
        return str(self)

    def __str__(self):
        return f"nt:{self.network}:ct:{int(self.coin)}:ci:{self.chain_id}"


def build_chain_from_components(components):
    """Build a :class:`Chain` from an already tokenised component mapping."""
    raw_network = components.get(COMP_NETWORK_TYPE)
    if raw_network is None:
        raise ParseError(ErrorCode.MISSING_NETWORK_TYPE)
    network_name = normalize(raw_network)
    if not network_name:
        raise ParseError(ErrorCode.MISSING_NETWORK_TYPE)
    network = NetworkType(network_name)
    if not network.is_valid():
        raise ParseError(ErrorCode.INVALID_NETWORK_TYPE, f'"{network_name}"')

    raw_coin = components.get(COMP_COIN_TYPE)
    if raw_coin is None:
        raise ParseError(ErrorCode.MISSING_COIN_TYPE)
    coin_text = trim(raw_coin)
    if not coin_text:
        raise ParseError(ErrorCode.MISSING_COIN_TYPE)
    try:
        coin = parse_uint32(coin_text)
    except ValueError:
        raise ParseError(ErrorCode.INVALID_COIN_TYPE, f'"{coin_text}"') from None

    raw_id = components.get(COMP_CHAIN_ID)
    if raw_id is None:
        raise ParseError(ErrorCode.MISSING_CHAIN_ID)
    chain_id = trim(raw_id)
    if not chain_id:
        raise ParseError(ErrorCode.MISSING_CHAIN_ID)

    return Chain(network, coin, chain_id)
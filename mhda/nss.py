"""Tokeniser for the namespace-specific string of an MHDA URN."""

from .errors import ErrorCode, ParseError
from .text import trim

PREFIX_MHDA = "urn:mhda:"

COMP_NETWORK_TYPE = "nt"
COMP_COIN_TYPE = "ct"
COMP_CHAIN_ID = "ci"
COMP_DERIVATION_TYPE = "dt"
COMP_DERIVATION_PATH = "dp"
COMP_ADDRESS_ALGORITHM = "aa"
COMP_ADDRESS_FORMAT = "af"
COMP_ADDRESS_PREFIX = "ap"
COMP_ADDRESS_SUFFIX = "as"

_KNOWN_COMPONENTS = frozenset(
    {
        COMP_NETWORK_TYPE, COMP_COIN_TYPE, COMP_CHAIN_ID,
        COMP_DERIVATION_TYPE, COMP_DERIVATION_PATH,
        COMP_ADDRESS_ALGORITHM, COMP_ADDRESS_FORMAT,
        COMP_ADDRESS_PREFIX, COMP_ADDRESS_SUFFIX,
    }
)


def is_known_component(key):
    """Report whether ``key`` names one of the defined NSS components."""
    return key in _KNOWN_COMPONENTS


def parse_nss_map(nss):
    """Split an NSS into a component dictionary.

    The NSS is a sequence of ``key:value`` pairs joined by ``:``. Unknown
    tokens are skipped; a missing, empty or duplicate value raises
    ParseError with INVALID_NSS. Values are stripped of whitespace.
    """
    components = {}
    tokens = iter(nss.split(":"))
    for key in tokens:
        if not is_known_component(key):
            continue
        raw = next(tokens, None)
        if raw is None:
            raise ParseError(ErrorCode.INVALID_NSS, f'missing value for "{key}"')
        value = trim(raw)
        if not value:
            raise ParseError(ErrorCode.INVALID_NSS, f'empty value for "{key}"')
        if key in components:
            raise ParseError(ErrorCode.INVALID_NSS, f'duplicate component "{key}"')
        components[key] = value
    return components
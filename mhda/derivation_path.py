"""Hierarchical-deterministic derivation paths and their per-scheme shapes."""

from dataclasses import dataclass

from .errors import ErrorCode, ParseError
from .text import parse_uint32_dec
from .types import DerivationType

_HARDENING_MARKERS = ("'", "h", "H")
_CHARGE_MASK = 0xFF

_BIP44_FAMILY = {
    DerivationType.BIP44: 44,
    DerivationType.BIP49: 49,
    DerivationType.BIP54: 54,
    DerivationType.BIP74: 74,
    DerivationType.BIP84: 84,
    DerivationType.BIP86: 86,
}

# Schemes whose purpose and coin levels are fixed by the scheme itself.
_FIXED_PREFIX = {
    DerivationType.CIP11: (44, 118),
    DerivationType.CIP1852: (1852, 1815),
    DerivationType.ZIP32: (32, 133),
}


@dataclass(frozen=True)
class AddressIndex:
    """One level of a derivation path: a 32-bit index and a hardening flag."""

    index: int = 0
    is_hardened: bool = False

    def __str__(self):
        return f"{self.index}'" if self.is_hardened else str(self.index)


def _as_type(dtype):
    return dtype if isinstance(dtype, DerivationType) else DerivationType(dtype)


def _as_level(level):
    return level if isinstance(level, AddressIndex) else AddressIndex(*level)


def _parse_segment(segment):
    hardened = segment.endswith(_HARDENING_MARKERS)
    if hardened:
        segment = segment[:-1]
    try:
        value = parse_uint32_dec(segment)
    except ValueError:
        return None
    return AddressIndex(value, hardened)


def _parse_levels(path):
    """Split ``m/<seg>/...`` into levels, or return None if malformed."""
    if not path.startswith("m"):
        return None
    if path == "m":
        return []
    if path[1] != "/" or len(path) == 2:
        return None
    segments = path[2:].split("/")
    if not all(segments):
        return None
    levels = [_parse_segment(segment) for segment in segments]
    return None if None in levels else levels


def _is(level, index):
    return level.index == index and level.is_hardened


def _valid_bip44_family(levels, purpose):
    return (
        len(levels) == 5
        and _is(levels[0], purpose)
        and levels[1].is_hardened
        and levels[2].is_hardened
        and not levels[3].is_hardened
        and levels[3].index <= 1
    )


def _valid_bip32(levels):
    return (
        len(levels) == 3
        and levels[0].is_hardened
        and not levels[1].is_hardened
        and levels[1].index <= 1
    )


def _valid_fixed_five(levels, purpose, coin):
    # The fourth level (charge or role) accepts any non-negative integer.
    return (
        len(levels) == 5
        and _is(levels[0], purpose)
        and _is(levels[1], coin)
        and levels[2].is_hardened
        and not levels[3].is_hardened
    )


def _valid_zip32(levels):
    return (
        len(levels) in (3, 4)
        and _is(levels[0], 32)
        and _is(levels[1], 133)
        and levels[2].is_hardened
    )


def _levels_fit(dtype, levels):
    if dtype == DerivationType.ROOT:
        return not levels
    if dtype in _BIP44_FAMILY:
        return _valid_bip44_family(levels, _BIP44_FAMILY[dtype])
    if dtype == DerivationType.BIP32:
        return _valid_bip32(levels)
    if dtype == DerivationType.SLIP10:
        return bool(levels)
    if dtype == DerivationType.CIP11:
        return _valid_fixed_five(levels, 44, 118)
    if dtype == DerivationType.CIP1852:
        return _valid_fixed_five(levels, 1852, 1815)
    if dtype == DerivationType.ZIP32:
        return _valid_zip32(levels)
    return False


def validate_derivation_path(dtype, path):
    """Report whether ``path`` has the shape required by derivation type ``dtype``."""
    dtype = _as_type(dtype)
    if not dtype.is_valid():
        return False
    if dtype == DerivationType.ROOT:
        return path == ""
    levels = _parse_levels(path)
    return levels is not None and _levels_fit(dtype, levels)


def _format_levels(levels):
    return "/".join(["m", *(str(level) for level in levels)])


class DerivationPath:
    """A derivation path under one scheme.

    For fixed-shape schemes the coin/account/charge/index shortcuts are kept
    alongside the level view; for SLIP-10 the levels are the only source of
    truth and the shortcuts stay at zero.
    """

    def __init__(
        self,
        dtype=DerivationType(),
        coin=0,
        account=0,
        charge=0,
        index=AddressIndex(),
    ):
        dtype = _as_type(dtype)
        if dtype == DerivationType.SLIP10:
            raise ValueError(
                "mhda: SLIP10 paths cannot be built from shortcut fields; "
                "use DerivationPath.from_levels"
            )
        self._type = dtype
        self._coin = coin
        self._account = account
        self._charge = charge & _CHARGE_MASK
        self._index = _as_level(index)
        self._has_index = bool(dtype) and dtype != DerivationType.ROOT
        self._levels = []
        self._rebuild_levels()

    @classmethod
    def from_levels(cls, dtype, levels):
        """Build a path from explicit levels; shortcuts are filled where the shape allows."""
        path = cls()
        path._type = _as_type(dtype)
        path._levels = [_as_level(level) for level in levels]
        path._populate_shortcuts()
        return path

    @classmethod
    def parse(cls, dtype, path):
        """Parse a textual path under ``dtype``; raises ParseError on failure."""
        dtype = _as_type(dtype)
        if not dtype.is_valid():
            raise ParseError(ErrorCode.INVALID_DERIVATION_TYPE, f'"{dtype}"')
        result = cls()
        result._type = dtype
        result.parse_path(path)
        return result

    @property
    def dtype(self):
        """The derivation scheme of this path."""
        return self._type

    @dtype.setter
    def dtype(self, value):
        self._type = _as_type(value)

    @property
    def coin(self):
        return self._coin

    @property
    def account(self):
        return self._account

    @property
    def charge(self):
        return self._charge

    @property
    def index(self):
        return self._index

    @property
    def is_hardened_address(self):
        return self._index.is_hardened

    @property
    def has_index(self):
        return self._has_index

    @property
    def levels(self):
        """The level-by-level view of the path; empty for root."""
        return tuple(self._levels)

    def parse_path(self, path):
        """Replace the path's contents by parsing ``path`` under the current type."""
        dtype = self._type
        if not dtype.is_valid():
            raise ParseError(ErrorCode.INVALID_DERIVATION_TYPE, f'"{dtype}"')
        if dtype == DerivationType.ROOT:
            if path:
                raise ParseError(
                    ErrorCode.INVALID_DERIVATION_PATH,
                    f'root derivation must have empty path, got "{path}"',
                )
            self._levels = []
            self._has_index = False
            return

        levels = _parse_levels(path)
        if levels is None or not _levels_fit(dtype, levels):
            raise ParseError(ErrorCode.INVALID_DERIVATION_PATH, f'"{path}"')

        if dtype == DerivationType.SLIP10:
            self._levels = levels
            self._has_index = bool(levels)
            return
        if dtype == DerivationType.BIP32:
            self._account = levels[0].index
            self._charge = levels[1].index & _CHARGE_MASK
            self._index = levels[2]
            self._has_index = True
        elif dtype == DerivationType.ZIP32:
            self._coin = 133
            self._account = levels[2].index
            self._has_index = len(levels) == 4
            self._index = levels[3] if self._has_index else AddressIndex()
        else:
            # BIP-44 family, CIP-11 and CIP-1852 share the five-level layout.
            self._coin = _FIXED_PREFIX.get(dtype, (0, levels[1].index))[1]
            self._account = levels[2].index
            self._charge = levels[3].index & _CHARGE_MASK
            self._index = levels[4]
            self._has_index = True
        self._rebuild_levels()

    def _populate_shortcuts(self):
        dtype, levels = self._type, self._levels
        if dtype == DerivationType.BIP32:
            if len(levels) >= 3:
                self._account = levels[0].index
                self._charge = levels[1].index & _CHARGE_MASK
                self._index = levels[2]
                self._has_index = True
        elif dtype in _BIP44_FAMILY or dtype in (
            DerivationType.CIP11,
            DerivationType.CIP1852,
        ):
            if len(levels) >= 5:
                self._coin = levels[1].index
                self._account = levels[2].index
                self._charge = levels[3].index & _CHARGE_MASK
                self._index = levels[4]
                self._has_index = True
        elif dtype == DerivationType.ZIP32:
            if len(levels) >= 3:
                self._coin = levels[1].index
                self._account = levels[2].index
            if len(levels) >= 4:
                self._index = levels[3]
                self._has_index = True
        elif dtype == DerivationType.SLIP10:
            self._has_index = bool(levels)

    def _fixed_prefix(self):
        if self._type in _BIP44_FAMILY:
            return _BIP44_FAMILY[self._type], self._coin
        return _FIXED_PREFIX.get(self._type)

    def _canonical_levels(self):
        """Levels implied by the shortcut fields, or None for an unknown scheme."""
        dtype = self._type
        if dtype == DerivationType.ROOT:
            return []
        if dtype == DerivationType.SLIP10:
            return list(self._levels)
        if dtype == DerivationType.BIP32:
            return [
                AddressIndex(self._account, True),
                AddressIndex(self._charge, False),
                self._index,
            ]
        prefix = self._fixed_prefix()
        if prefix is None:
            return None
        purpose, coin = prefix
        levels = [
            AddressIndex(purpose, True),
            AddressIndex(coin, True),
            AddressIndex(self._account, True),
        ]
        if dtype == DerivationType.ZIP32:
            if self._has_index:
                levels.append(self._index)
            return levels
        levels.append(AddressIndex(self._charge, False))
        levels.append(self._index)
        return levels

    def _rebuild_levels(self):
        levels = self._canonical_levels()
        if levels is not None:
            self._levels = levels

    def __str__(self):
        if self._type == DerivationType.ROOT:
            return ""
        levels = self._canonical_levels()
        return "" if levels is None else _format_levels(levels)

    def _state(self):
        return (
            self._type,
            self._coin,
            self._account,
            self._charge,
            self._index,
            self._has_index,
            tuple(self._levels),
        )

    def __eq__(self, other):
        if not isinstance(other, DerivationPath):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None

    def __repr__(self):
        return f"DerivationPath({self._type.value!r}, {str(self)!r})"
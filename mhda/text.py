"""Small string helpers: ASCII case folding, trimming and integer parsing."""

_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_WHITESPACE = " \t\n\v\f\r"
_DEC_DIGITS = frozenset("0123456789")
_HEX_DIGITS = _DEC_DIGITS | frozenset("abcdefABCDEF")
_UINT32_MAX = 0xFFFFFFFF


def ascii_lower(s):
    """Lowercase ASCII letters only, leaving every other character as is."""
    return s.translate(_UPPER_TO_LOWER)


def trim(s):
    """Strip leading and trailing ASCII whitespace."""
    return s.strip(_WHITESPACE)


def normalize(s):
    """Trim surrounding whitespace and ASCII-lowercase the result."""
    return ascii_lower(trim(s))


def has_prefix_fold(s, prefix):
    """Report whether ``s`` begins with ``prefix``, ignoring ASCII case."""
    if len(s) < len(prefix):
        return False
    return ascii_lower(s[: len(prefix)]) == ascii_lower(prefix)


def strip_rqf(nss):
    """Drop any rq-component (``?``) or f-component (``#``) and what follows."""
    cut = min((i for i in (nss.find("?"), nss.find("#")) if i >= 0), default=-1)
    return nss if cut < 0 else nss[:cut]


def _parse_in_base(s, base, original):
    digits = _HEX_DIGITS if base == 16 else _DEC_DIGITS
    if not s or not set(s) <= digits:
        raise ValueError(f"invalid unsigned integer: {original!r}")
    value = int(s, base)
    if value > _UINT32_MAX:
        raise ValueError(f"value out of 32-bit range: {original!r}")
    return value


def parse_uint32(s):
    """Parse a decimal or ``0x``-prefixed hexadecimal 32-bit unsigned integer.

    Raises ValueError on malformed input or overflow.
    """
    if s[:2] in ("0x", "0X"):
        return _parse_in_base(s[2:], 16, s)
    return _parse_in_base(s, 10, s)


def parse_uint32_dec(s):
    """Parse a strictly decimal 32-bit unsigned integer.

    Raises ValueError on malformed input or overflow.
    """
    return _parse_in_base(s, 10, s)
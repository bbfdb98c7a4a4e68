"""Error codes and the single exception type raised by the mhda package."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Failure categories reported through :class:`ParseError`."""

    INVALID_URN = 0
    INVALID_NSS = 1
    MISSING_NETWORK_TYPE = 2
    INVALID_NETWORK_TYPE = 3
    MISSING_COIN_TYPE = 4
    INVALID_COIN_TYPE = 5
    MISSING_CHAIN_ID = 6
    INVALID_DERIVATION_TYPE = 7
    INVALID_DERIVATION_PATH = 8
    INVALID_ALGORITHM = 9
    INVALID_FORMAT = 10
    INCOMPATIBLE = 11
    UNINITIALIZED_ADDRESS = 12


_MESSAGES = {
    ErrorCode.INVALID_URN: "mhda: not a valid mhda urn",
    ErrorCode.INVALID_NSS: "mhda: cannot parse nss",
    ErrorCode.MISSING_NETWORK_TYPE: 'mhda: "nt" is required',
    ErrorCode.INVALID_NETWORK_TYPE: 'mhda: invalid "nt"',
    ErrorCode.MISSING_COIN_TYPE: 'mhda: "ct" is required',
    ErrorCode.INVALID_COIN_TYPE: 'mhda: invalid "ct"',
    ErrorCode.MISSING_CHAIN_ID: 'mhda: "ci" is required',
    ErrorCode.INVALID_DERIVATION_TYPE: 'mhda: invalid "dt"',
    ErrorCode.INVALID_DERIVATION_PATH: 'mhda: invalid "dp"',
    ErrorCode.INVALID_ALGORITHM: 'mhda: invalid "aa"',
    ErrorCode.INVALID_FORMAT: 'mhda: invalid "af"',
    ErrorCode.INCOMPATIBLE: "mhda: incompatible network/algorithm/format",
    ErrorCode.UNINITIALIZED_ADDRESS: "mhda: address is not initialized",
}


def error_message(code):
    """Return the fixed message text for an error code."""
    return _MESSAGES.get(code, "mhda: unknown error")


class ParseError(ValueError):
    """Raised by every parsing, validation and construction failure.

    ``code`` identifies the failure category; the message may quote the
    offending input but is not part of the contract.
    """

    def __init__(self, code, detail=""):
        self.code = ErrorCode(code)
        self.detail = detail
        message = error_message(self.code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
import pytest

from mhda.errors import ErrorCode, ParseError, error_message


@pytest.mark.parametrize(
    "code, text",
    [
        (ErrorCode.INVALID_URN, "mhda: not a valid mhda urn"),
        (ErrorCode.INVALID_NSS, "mhda: cannot parse nss"),
        (ErrorCode.MISSING_NETWORK_TYPE, 'mhda: "nt" is required'),
        (ErrorCode.INVALID_NETWORK_TYPE, 'mhda: invalid "nt"'),
        (ErrorCode.MISSING_COIN_TYPE, 'mhda: "ct" is required'),
        (ErrorCode.INVALID_COIN_TYPE, 'mhda: invalid "ct"'),
        (ErrorCode.MISSING_CHAIN_ID, 'mhda: "ci" is required'),
        (ErrorCode.INVALID_DERIVATION_TYPE, 'mhda: invalid "dt"'),
        (ErrorCode.INVALID_DERIVATION_PATH, 'mhda: invalid "dp"'),
        (ErrorCode.INVALID_ALGORITHM, 'mhda: invalid "aa"'),
        (ErrorCode.INVALID_FORMAT, 'mhda: invalid "af"'),
        (ErrorCode.INCOMPATIBLE, "mhda: incompatible network/algorithm/format"),
        (ErrorCode.UNINITIALIZED_ADDRESS, "mhda: address is not initialized"),
    ],
)
def test_error_message_per_code(code, text):
    assert error_message(code) == text


def test_every_code_has_a_distinct_message():
    messages = {error_message(code) for code in ErrorCode}
    assert len(messages) == len(ErrorCode)
    assert "mhda: unknown error" not in messages


def test_parse_error_without_detail_uses_bare_message():
    err = ParseError(ErrorCode.UNINITIALIZED_ADDRESS)
    assert err.code is ErrorCode.UNINITIALIZED_ADDRESS
    assert str(err) == "mhda: address is not initialized"
    assert err.detail == ""


def test_parse_error_with_detail_appends_it():
    err = ParseError(ErrorCode.INVALID_COIN_TYPE, '"notanumber"')
    assert str(err) == 'mhda: invalid "ct": "notanumber"'
    assert err.detail == '"notanumber"'


def test_parse_error_carries_code_and_detail():
    err = ParseError(ErrorCode.INVALID_NSS, "duplicate")
    assert err.code == ErrorCode.INVALID_NSS
    assert str(err) == "mhda: cannot parse nss: duplicate"


def test_parse_error_is_a_value_error():
    err = ParseError(ErrorCode.INVALID_URN)
    assert isinstance(err, ValueError)
    assert str(err) == "mhda: not a valid mhda urn"


def test_parse_error_accepts_integer_code():
    err = ParseError(int(ErrorCode.INCOMPATIBLE))
    assert err.code is ErrorCode.INCOMPATIBLE
    assert str(err) == "mhda: incompatible network/algorithm/format"


def test_error_codes_are_ordered_from_zero():
    codes = [ParseError(i).code for i in range(len(ErrorCode))]
    assert codes == list(ErrorCode)
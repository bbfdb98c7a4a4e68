import pytest

from mhda.hashing import sha1_hex, sha256_hex

URN = "urn:mhda:nt:evm:ct:60:ci:1"
NSS = "nt:evm:ct:60:ci:1"


def test_reference_values_for_canonical_urn():
    assert sha1_hex(URN) == "1b67879a4e427b4b26dbf1518569b8ddebb6b6ba"
    assert sha256_hex(URN) == (
        "47ff599055bf943d1fca281f2177859709e2c2dfedb3f75a955dd8c0e65ed034"
    )


def test_reference_values_for_nss():
    assert sha1_hex(NSS) == "5f3e128a6968997f0b00f629296feb5d90678799"
    assert sha256_hex(NSS) == (
        "88429e10123e1d49cf67d44145a5493c08bf599937541e0dee4fc00873eb8215"
    )


@pytest.mark.parametrize(
    "data, sha1, sha256",
    [
        (
            "",
            "da39a3ee5e6b4b0d3255bfef95601890afd80709",
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        ),
        (
            "abc",
            "a9993e364706816aba3e25717850c26c9cd0d89d",
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
        ),
    ],
)
def test_standard_vectors(data, sha1, sha256):
    assert sha1_hex(data) == sha1
    assert sha256_hex(data) == sha256


def test_bytes_and_str_agree():
    assert sha1_hex(URN.encode()) == sha1_hex(URN)
    assert sha256_hex(URN.encode()) == sha256_hex(URN)


def test_shape_and_determinism():
    assert len(sha1_hex(URN)) == 40
    assert len(sha256_hex(URN)) == 64
    assert sha256_hex(URN) == sha256_hex(URN)
    assert sha256_hex(URN) != sha256_hex("urn:mhda:nt:evm:ct:60:ci:2")
    assert set(sha256_hex(URN)) <= set("0123456789abcdef")


def test_long_input_spanning_many_blocks():
    data = "A" * (1 << 16)
    assert len(sha256_hex(data)) == 64
    assert sha256_hex(data) != sha256_hex(data[:-1])
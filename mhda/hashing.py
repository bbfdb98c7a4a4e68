"""Hex digests used for content addressing of canonical MHDA strings."""

import hashlib


def _as_bytes(data):
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    return data.encode("utf-8")


def sha1_hex(data):
    """Return the SHA-1 digest of ``data`` as 40 lowercase hex characters."""
    return hashlib.sha1(_as_bytes(data)).hexdigest()


def sha256_hex(data):
    """Return the SHA-256 digest of ``data`` as 64 lowercase hex characters."""
    return hashlib.sha256(_as_bytes(data)).hexdigest()
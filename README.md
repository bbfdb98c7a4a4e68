# mhda

Building blocks for MultiChain Hierarchical Deterministic Address (MHDA)
descriptors in Python.

An MHDA is a URN that names a blockchain address derived from an HD
wallet:

```
urn:mhda:nt:<network>:ct:<slip44>:ci:<chain_id>:dt:<derivation>:dp:<path>:aa:<algorithm>:af:<format>:ap:<prefix>:as:<suffix>
```

This package provides the pieces such a descriptor is made of: the named
value types, the namespace-specific-string tokeniser, chain keys,
derivation paths, the per-network compatibility matrix and hex digests.
It has no runtime dependencies.

Supported networks: `btc`, `evm`, `avm`, `tvm`, `cosmos`, `sol`, `xrp`,
`xlm`, `near`, `apt`, `sui`, `ada`, `algo`, `ton`.

Supported derivation schemes: `root`, `bip32`, `bip44`, `bip49`, `bip54`,
`bip74`, `bip84`, `bip86`, `slip10`, `cip11`, `cip1852`, `zip32`.

## Installation

```
pip install .
```

## Value types

`mhda.types` holds `NetworkType`, `Algorithm`, `Format` and
`DerivationType`, each with named constants (`NetworkType.ETHEREUM_VM`,
`Algorithm.ED25519`, `Format.BECH32M`, `DerivationType.BIP44`, ...) and an
`is_valid()` check, plus the `Coin` enumeration of SLIP-44 coin types.

Lookups ignore case and surrounding whitespace:

```python
from mhda.types import network_type_from_string, derivation_type_from_string

network_type_from_string("  XRP  ")      # NetworkType('xrp')
network_type_from_string("xxx")          # None
derivation_type_from_string("CIP1852")   # DerivationType('cip1852')
```

`derivation_type_from_string` raises `ParseError` for an unknown scheme;
the other lookups return `None`.

## Errors

Every failure is raised as `mhda.errors.ParseError`, which is a
`ValueError` and carries an `ErrorCode` in its `code` attribute: an invalid
URN or NSS, a missing or invalid component, an invalid derivation type or
path, an incompatible combination, or an uninitialised address.

## Derivation paths

```python
from mhda.derivation_path import DerivationPath, validate_derivation_path
from mhda.types import DerivationType

path = DerivationPath.parse(DerivationType.BIP44, "m/44H/0h/0'/1/2'")
print(str(path))        # m/44'/0'/0'/1/2'
print(path.account)     # 0
print(path.levels)      # level-by-level AddressIndex view

validate_derivation_path(DerivationType.BIP44, "m/44'/60'/0'/2/0")  # False: charge must be 0 or 1
```

Hardening markers `'`, `h` and `H` are all accepted and written back as
`'`. SLIP-10 paths of any length are built with
`DerivationPath.from_levels`; the shortcut constructor refuses them.

## Chain keys

The chain part `nt:X:ct:Y:ci:Z` is a key of its own, usable as a map or
cache key. The coin type may be decimal or `0x` hexadecimal; the key is
always written in decimal.

```python
from mhda.chain import Chain

chain = Chain.from_key("nt:evm:ct:0x3c:ci:1:dt:bip44:dp:m/44'/60'/0'/0/0")
print(chain.key())  # nt:evm:ct:60:ci:1
```

## NSS tokenising

```python
from mhda.nss import parse_nss_map

parse_nss_map("nt:evm:ct:60:ci:1:xx:future")
# {'nt': 'evm', 'ct': '60', 'ci': '1'}
```

Unknown tokens are skipped; empty, missing or duplicate values raise
`ParseError`.

## Compatibility matrix

`mhda.compatibility` answers which algorithms, formats and derivation
schemes each network allows, and what its defaults are:

```python
from mhda.compatibility import default_format, network_allows_algorithm
from mhda.types import Algorithm, NetworkType

network_allows_algorithm(NetworkType.ETHEREUM_VM, Algorithm.ED25519)  # False
default_format(NetworkType.TONCOIN)                                   # Format('base64url')
```

Bitcoin and Avalanche have several valid formats and so no default format.
`root` is allowed for every registered network.

## Hashes

`mhda.hashing.sha1_hex` and `sha256_hex` return lowercase hex digests of a
string or bytes. SHA-1 is kept only for compatibility; prefer SHA-256.

## What this package does not do

There is no address object and no whole-URN parser: the package does not
read a full `urn:mhda:...` string into one value, write it back in
canonical form, or run strict validation over a whole descriptor. There is
no command-line tool either. The modules above are the parts such
functions would be built from.

## Tests

```
pip install .[test]
pytest
```
"""Value types, chain keys, derivation paths and compatibility rules for MHDA descriptors."""

__version__ = "0.1.0"

__all__ = [
    "chain",
    "compatibility",
    "derivation_path",
    "errors",
    "hashing",
    "nss",
    "text",
    "types",
]
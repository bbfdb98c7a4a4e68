[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mhda"
version = "0.1.0"
description = "Building blocks for MultiChain Hierarchical Deterministic Address (MHDA) descriptors: chain keys, derivation paths and network compatibility"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mhda",
    "urn",
    "hd-wallet",
    "bip32",
    "bip44",
    "slip10",
    "derivation-path",
    "blockchain",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mhda"]

[tool.hatch.build.targets.sdist]
include = ["mhda", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["mhda"]

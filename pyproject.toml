[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brainkeys"
version = "0.1.0"
description = "Bech32/SegWit address encoding, fixed-width integer helpers and secp256k1 field arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["secp256k1", "bech32", "segwit", "finite-field", "modular-arithmetic", "bitcoin"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["brainkeys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

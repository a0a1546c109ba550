[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caspersdk"
version = "1.0.0"
description = "Public keys, global state keys, secp256k1 signing and deploy record types for the Casper network"
requires-python = ">=3.10"
keywords = ["casper", "blockchain", "public-key", "secp256k1", "ed25519", "cep57", "account-hash"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["caspersdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

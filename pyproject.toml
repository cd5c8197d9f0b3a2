[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkblocks"
version = "0.1.0"
description = "Pure-Python cryptographic building blocks: SHA-256, SHA-512, HMAC, big-integer helpers and a random byte source"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "sha512", "hmac", "hash", "cryptography", "zero-knowledge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

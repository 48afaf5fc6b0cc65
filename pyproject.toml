[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmsm"
version = "0.1.0"
description = "Pure-Python SM3 hashing, SM4 block cipher with ECB, CBC, CFB, OFB and GCM modes, and SM2 curve arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["sm2", "sm3", "sm4", "gcm", "elliptic-curve", "hash", "block-cipher", "cryptography"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gmsm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

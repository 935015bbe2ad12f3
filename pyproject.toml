[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zxkit"
version = "0.1.0"
description = "Encoding and formatting helpers for hardware-wallet style applications: Bech32, Base58, Base64, BCD numbers, DER signatures and UTF-8 tools."
requires-python = ">=3.10"
dependencies = []
keywords = ["bech32", "segwit", "base58", "base64", "bcd", "der", "utf8", "apdu"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletcore"
version = "0.1.0"
description = "Wallet core domain: clients, accounts and transfers with SQL persistence"
requires-python = ">=3.10"
dependencies = []
keywords = ["wallet", "accounts", "transactions", "ledger", "sqlite"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["walletcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soltrade"
version = "0.5.1"
description = "Pricing math, protocol constants and local caches for trading on Solana DEX programs."
requires-python = ">=3.10"
dependencies = []
keywords = ["solana", "pumpfun", "pumpswap", "raydium", "bonk", "bonding-curve", "base58", "trading"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["soltrade"]

[tool.pytest.ini_options]
addopts = "-ra"

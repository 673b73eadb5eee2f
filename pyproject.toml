[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solswaps"
version = "0.1.0"
description = "Decode Solana DEX pool creations and Jupiter aggregator swaps from instruction data"
requires-python = ">=3.10"
dependencies = []
keywords = ["solana", "dex", "jupiter", "raydium", "orca", "meteora", "swaps", "pools"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solswaps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "momentumbt"
version = "0.1.0"
description = "A cross-sectional momentum long/short backtester for daily stock data in CSV form"
requires-python = ">=3.10"
dependencies = []
keywords = ["backtest", "momentum", "quant", "long-short", "factor", "finance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
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

[project.scripts]
momentumbt = "momentumbt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["momentumbt"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

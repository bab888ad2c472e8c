[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deribitfix"
version = "0.1.1"
description = "Build Deribit FIX 4.4 protocol messages: orders, cancels, mass status, mass cancel and market data."
requires-python = ">=3.10"
dependencies = []
keywords = ["fix", "fix44", "finance", "trading", "deribit", "market-data"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["deribitfix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

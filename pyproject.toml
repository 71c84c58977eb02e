[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depthwatch"
version = "0.1.0"
description = "Keep the latest order-book depth snapshot of each stream from a combined futures depth feed"
requires-python = ">=3.10"
keywords = ["order book", "depth", "websocket", "futures", "market data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Financial and Insurance Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
depthwatch = "depthwatch.feed:main"

[tool.hatch.build.targets.wheel]
packages = ["depthwatch"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "banking"
version = "0.1.0"
description = "In-memory bank with debit, credit, saving and family accounts, cards and PIN-protected operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "account", "credit", "debit", "savings"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["banking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

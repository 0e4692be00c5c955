[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prodline"
version = "0.1.0"
description = "Domain model for an automated production line: elements, records, operator storage, sigmoid performance curves and their reports."
requires-python = ">=3.10"
keywords = ["production line", "automation", "sigmoid", "performance", "operators", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Manufacturing",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["prodline"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

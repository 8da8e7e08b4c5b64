[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubledger"
version = "0.1.0"
description = "Replay a day of events at a computer club and report revenue and table occupancy"
requires-python = ">=3.10"
dependencies = []
keywords = ["club", "billing", "event-log", "tables", "queue", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clubledger = "clubledger.manager:main"

[tool.hatch.build.targets.wheel]
packages = ["clubledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exchangerates"
version = "0.1.0"
description = "HTTP API that serves fiat cross rates from Open Exchange Rates and crypto conversions from a fixed rate table."
requires-python = ">=3.10"
keywords = ["exchange rates", "currency", "crypto", "cross rate", "http api"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "flask>=2.3",
    "werkzeug>=2.3",
    "requests>=2.31",
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "responses>=0.24",
]

[project.scripts]
exchangerates = "exchangerates.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exchangerates"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

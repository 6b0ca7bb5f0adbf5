[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "throughput"
version = "0.1.0"
description = "Building blocks for network throughput measurement: unit parsing and formatting, timers, test settings, error codes and TCP_INFO access."
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "throughput", "bandwidth", "tcp", "udp", "measurement", "timers", "tcp_info"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["throughput"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portscanx"
version = "0.1.0"
description = "A fast and flexible asynchronous TCP port scanner."
requires-python = ">=3.10"
dependencies = []
keywords = ["port", "scanner", "tcp", "network", "asyncio", "cidr"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Framework :: AsyncIO",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
portscanx = "portscanx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["portscanx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

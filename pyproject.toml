[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icmpping"
version = "0.1.0"
description = "A small ping utility that sends ICMP echo requests over a raw socket and reports round-trip statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["ping", "icmp", "network", "echo", "latency", "raw socket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
icmpping = "icmpping.ping:main"

[tool.hatch.build.targets.wheel]
packages = ["icmpping"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

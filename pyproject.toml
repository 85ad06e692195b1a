[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pintop"
version = "0.1.0"
description = "HTML rendering of network monitoring snapshots: speed tests, traceroute paths, alerts and retention status."
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "monitoring", "dashboard", "html", "traceroute", "speed-test"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pintop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

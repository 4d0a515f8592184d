[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serverswitch"
version = "1.0.0"
description = "Point ZennoLab product configuration files at a different server domain, keeping backups of the originals."
requires-python = ">=3.10"
dependencies = []
keywords = ["zennolab", "configuration", "xml", "endpoint", "server", "backup"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["serverswitch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilbox"
version = "0.1.0"
description = "Everyday helpers for strings, maps, numbers, time, processes and HTTP."
requires-python = ">=3.10"
keywords = ["utilities", "strings", "conversion", "time", "http", "helpers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "jinja2",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["utilbox"]

[tool.pytest.ini_options]
addopts = "-ra"

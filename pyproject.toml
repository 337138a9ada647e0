[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "confscope"
version = "0.1.0"
description = "Building blocks for declarative configuration: namespaces, visitors, checks and metadata."
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration", "config", "validation", "namespaces", "checks"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["confscope"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "assertkit"
version = "0.1.0"
description = "Expression analysis for assertion diagnostics: C++ type prettifying, token tables, expression decomposition and value stringification"
requires-python = ">=3.10"
dependencies = []
keywords = ["assertions", "diagnostics", "c++", "debugging", "stringification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["assertkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

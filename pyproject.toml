[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parsekit"
version = "0.1.0"
description = "Byte-level parsing helpers: whitespace utilities, XML escaping and number parsing and formatting."
requires-python = ">=3.10"
dependencies = []
keywords = ["parsing", "bytes", "number formatting", "xml", "whitespace"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parsekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

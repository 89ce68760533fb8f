[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kplc"
version = "0.1.0"
description = "Symbol table and stack-machine code generation for the KPL teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "kpl", "symbol-table", "code-generation", "stack-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kplc"]

[tool.pytest.ini_options]
addopts = "-ra"

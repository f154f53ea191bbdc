[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcc"
version = "0.1.0"
description = "Front end of a small C compiler: parses a tiny C subset and lowers it to assembly constructs"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "c", "parser", "ast", "assembly", "codegen"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rcc"]

[tool.pytest.ini_options]
addopts = "-ra"

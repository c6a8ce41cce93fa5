[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyft"
version = "0.1.0"
description = "A small printf with strict format validation, plus classic string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "strings", "itoa", "atoi"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pyft-demo = "pyft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pyft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigcalc"
version = "0.1.0"
description = "Arbitrary-precision decimal calculator for non-negative integers, digit by digit"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arbitrary precision", "big integer", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bigcalc = "bigcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bigcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

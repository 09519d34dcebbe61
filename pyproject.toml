[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicprogs"
version = "0.1.0"
description = "Classic beginner programming exercises: number theory, base conversions, text, arrays, matrices and small data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "algorithms", "number-theory", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classicprogs = "classicprogs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["classicprogs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xqcore"
version = "0.1.0"
description = "Core building blocks for Xiangqi (Chinese chess) engines: board types, 128-bit bitboards, attack tables, debug statistics and benchmark positions"
requires-python = ">=3.10"
dependencies = [
    "zstandard",
]
keywords = [
    "xiangqi",
    "chinese-chess",
    "bitboard",
    "chess-engine",
    "benchmark",
]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xqcore"]

[tool.hatch.build.targets.sdist]
include = [
    "xqcore",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

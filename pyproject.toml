[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintlib"
version = "1.0.0"
description = "Arbitrary-precision signed integers on 32-bit chunks with Karatsuba, long division and Montgomery arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bigint",
    "arbitrary precision",
    "karatsuba",
    "montgomery",
    "modular arithmetic",
    "number theory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bintlib = "bintlib.cli:main"
bintlib-bench = "bintlib.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["bintlib"]

[tool.hatch.build.targets.sdist]
include = ["bintlib", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"

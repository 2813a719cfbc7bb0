[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortsteps"
version = "0.1.0"
description = "Classic sorting algorithms that print every step they take"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "algorithms",
    "education",
    "bubble-sort",
    "quick-sort",
    "merge-sort",
    "heap-sort",
    "radix-sort",
    "bitonic-sort",
    "linked-list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortsteps = "sortsteps.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortsteps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

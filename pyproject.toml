[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures, algorithms and small simulations in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "sorting",
    "heap",
    "binary-search-tree",
    "hash-table",
    "lru-cache",
    "ring-buffer",
    "timer-wheel",
    "state-machine",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-atm = "structkit.state_machine:main"
structkit-deck = "structkit.deck:main"
structkit-airline = "structkit.airline:main"
structkit-worker = "structkit.worker:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

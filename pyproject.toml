[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tapnverify"
version = "0.1.0"
description = "Timed-arc Petri net models, queries, verification options and waiting lists for discrete-time model checking"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "petri-net",
    "timed-arc-petri-net",
    "tapn",
    "model-checking",
    "verification",
    "query",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tapnverify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

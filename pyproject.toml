[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventgen"
version = "0.1.0"
description = "Building blocks for simulated collision events: particle guns, pile-up, vertex smearing, event merging, readers and converters"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "event generation", "hepevt", "particle gun", "pile-up", "vertex smearing", "monte carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eventgen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

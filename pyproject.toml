[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kisscr"
version = "0.1.0"
description = "Collect cosmic-ray measurements from several databases and tables into one uniform text format"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cosmic rays",
    "astroparticle physics",
    "spectra",
    "CRDB",
    "KCDC",
    "SSDC",
    "data conversion",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kisscr = "kisscr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kisscr"]

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
warn_unused_ignores = true
warn_redundant_casts = true

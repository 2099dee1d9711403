[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datui"
version = "0.1.0"
description = "A terminal viewer for tabular data files: CSV, TSV, PSV, JSON, JSON Lines and Parquet"
requires-python = ">=3.10"
keywords = ["tui", "terminal", "csv", "parquet", "json", "dataframe", "viewer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Utilities",
]
dependencies = [
    "pandas",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
datui = "datui.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datui"]

[tool.pytest.ini_options]
addopts = "-ra"

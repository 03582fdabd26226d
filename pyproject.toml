[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "s1pview"
version = "0.1.0"
description = "Read one-port Touchstone (.s1p) files and turn them into log-magnitude plot data"
requires-python = ">=3.10"
dependencies = []
keywords = ["touchstone", "s1p", "s-parameters", "rf", "log-magnitude", "vna"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
s1pview = "s1pview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["s1pview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

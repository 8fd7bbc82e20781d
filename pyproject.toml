[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficflow"
version = "1.0.0"
description = "Traffic flow growth forecasting with a binary project format, table export and charts"
requires-python = ">=3.10"
keywords = ["traffic", "forecast", "transport", "flow", "intensity"]
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
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
trafficflow = "trafficflow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trafficflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

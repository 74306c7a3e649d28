[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linearkit"
version = "0.1.0"
description = "Small dense vector and matrix arithmetic in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "vector", "matrix", "math"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linearkit = "linearkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linearkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

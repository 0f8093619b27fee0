[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cloverleaf"
version = "0.1.0"
description = "Sparse graph structures, distance metrics, feature stores and sampling helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "csr", "cdf", "distance", "sampling", "features"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cloverleaf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

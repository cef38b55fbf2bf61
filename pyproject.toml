[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrices"
version = "0.1.0"
description = "Small dense matrices and 3D vectors: products, determinants, adjoints and inverses."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "determinant", "inverse", "adjoint", "cofactor", "vector", "linear algebra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matrices = "matrices.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["matrices"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

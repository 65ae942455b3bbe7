[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical methods workbench: quadrature, ODE solvers, interpolation and least-squares fitting"
requires-python = ">=3.10"
dependencies = []
keywords = ["numerical methods", "integration", "ode", "interpolation", "least squares"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlab-integrate = "numlab.integration:main"
numlab-ode = "numlab.odesolve:main"
numlab-fit = "numlab.fitting:main"

[tool.setuptools]
packages = ["numlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

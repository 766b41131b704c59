[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Numerical mathematics on NumPy arrays: statistics, interest formulas, gradient descent, interpolation, ODE solving, fractals and expression nodes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "numerics",
    "statistics",
    "regression",
    "gradient-descent",
    "interpolation",
    "ode",
    "runge-kutta",
    "fractals",
    "mandelbrot",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
addopts = "-ra"

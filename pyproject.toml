[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnuglot"
version = "0.1.0"
description = "Simple 1, 2 and 3 dimensional point and line plots driven through gnuplot"
requires-python = ">=3.10"
dependencies = []
keywords = ["gnuplot", "plot", "chart", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gnuglot-demo = "gnuglot.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["gnuglot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

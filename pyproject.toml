[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probviz"
version = "0.1.0"
description = "Interactive explorer for continuous and discrete probability distributions"
requires-python = ">=3.10"
keywords = ["probability", "statistics", "distributions", "visualization", "pdf", "cdf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
    "matplotlib",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
probviz = "probviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["probviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

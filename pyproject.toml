[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotcore"
version = "0.1.0"
description = "Data containers and geometry for plot elements: Bézier curves, histograms, heat maps, Sankey diagrams, error points and cycle detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["plot", "histogram", "heatmap", "sankey", "bezier", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["plotcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

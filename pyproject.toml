[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grblscene"
version = "0.8.1"
description = "Vertex geometry for CNC visualisation: tool, origin, height-map grid, border and interpolated surface drawers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "grbl", "heightmap", "visualization", "geometry", "interpolation", "vertices"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
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
packages = ["grblscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

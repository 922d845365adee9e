[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volition"
version = "0.1.0"
description = "Building blocks of a software 3D renderer: fixed-point and vector math, colors, scanline interpolators, events, timing and configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["software-rendering", "rasterizer", "fixed-point", "3d", "interpolation", "game-engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["volition"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seamcarve"
version = "0.1.0"
description = "Content-aware shrinking of plain PPM images by seam carving"
requires-python = ">=3.10"
dependencies = []
keywords = ["seam carving", "image resizing", "ppm", "content-aware", "image processing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seamcarve-resize = "seamcarve.resize:main"

[tool.hatch.build.targets.wheel]
packages = ["seamcarve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

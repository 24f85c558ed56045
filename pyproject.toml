[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciidraw"
version = "0.1.0"
description = "Draw triangles, squares, arrows and bitmap-font characters as ASCII art"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii", "ascii-art", "bitmap-font", "shapes", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Artistic Software",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asciidraw = "asciidraw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asciidraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "videorating"
version = "0.1.0"
description = "Load a catalog of movies and series episodes from CSV files, search it and rate its videos."
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "catalog", "rating", "movies", "series", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
videorating = "videorating.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["videorating"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

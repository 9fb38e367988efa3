[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Small programming puzzles with working solutions, plus a builder for rectangular image collages."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "puzzles",
    "algorithms",
    "exercises",
    "anagram",
    "roman-numerals",
    "jaro",
    "collage",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
puzzlebox-spiral = "puzzlebox.spiral:main"
nasacollage = "puzzlebox.nasacollage.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aventura"
version = "0.1.0"
description = "A small text adventure role-playing game played at the terminal"
requires-python = ">=3.10"
keywords = ["game", "text adventure", "role-playing", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Romanian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aventura = "aventura.joc:main"

[tool.hatch.build.targets.wheel]
packages = ["aventura"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termchess"
version = "0.1.0"
description = "Two-player chess in the terminal, with check, checkmate, stalemate and saved games"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "terminal", "board game", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termchess = "termchess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

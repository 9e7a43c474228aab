[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitchess"
version = "1.0.0"
description = "Bitboard chess board representation and pseudo-legal move generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "move generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chess-cli = "bitchess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bitchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

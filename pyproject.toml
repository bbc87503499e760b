[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceprojeckt"
version = "1.0.0"
description = "A small vertical space shooter built on a minimal actor/world game engine."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame", "engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spaceprojeckt = "spaceprojeckt.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceprojeckt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

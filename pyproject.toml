[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeltraders"
version = "0.1.0"
description = "A small pixel client for the Space Traders game: loads your agent and draws it in a window."
requires-python = ">=3.10"
keywords = ["space-traders", "game", "pygame", "pixel", "client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixeltraders = "pixeltraders.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixeltraders"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

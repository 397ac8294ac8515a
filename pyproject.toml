[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sanselgames"
version = "0.1.0"
description = "Two small arcade games: a grid snake with walls and apples, and an animated dino."
requires-python = ">=3.10"
keywords = ["game", "snake", "arcade", "pygame", "dino"]
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
sansels-snake = "sanselgames.snake_app:main"
sansels-dino = "sanselgames.dino_app:main"

[tool.hatch.build.targets.wheel]
packages = ["sanselgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

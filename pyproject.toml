[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "playlab"
version = "0.1.0"
description = "Small programming-exercise games: a hangman guesser, a turtle-style painter and a snake game"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["hangman", "snake", "turtle", "painter", "games", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
playlab-hangman = "playlab.hangman.play:main"
playlab-hangman-assess = "playlab.hangman.assessment:main"
playlab-painter = "playlab.painter.figures:main"
playlab-snake = "playlab.snake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["playlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

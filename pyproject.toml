[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flapbird"
version = "0.1.0"
description = "A small side-scrolling flappy-bird style arcade game with pipes, coins, lives and a saved highscore."
requires-python = ">=3.10"
keywords = ["game", "arcade", "flappy", "side-scroller", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flapbird = "flapbird.app:main"

[tool.hatch.build.targets.wheel]
packages = ["flapbird"]

[tool.pytest.ini_options]
addopts = "-ra"

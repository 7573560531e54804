[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paddleball"
version = "0.1.0"
description = "A two-player table-tennis arcade game with a small rectangle-collision toolkit"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pong", "arcade", "game", "collision", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
paddleball = "paddleball.app:main"
paddleball-collision = "paddleball.app:collision_demo"

[tool.hatch.build.targets.wheel]
packages = ["paddleball"]

[tool.pytest.ini_options]
addopts = "-ra"

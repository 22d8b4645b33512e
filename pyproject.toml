[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clickchess"
version = "0.1.0"
description = "A two-player point-and-click chess board with move highlighting, en passant, promotion and checkmate detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "tkinter", "two player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
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
clickchess = "clickchess.app:main"

[tool.hatch.build.targets.wheel]
packages = ["clickchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gophertypist"
version = "0.1.0"
description = "A small typing game with a quick mode, a timed hard mode and a local leaderboard."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["typing", "game", "typing-tutor", "leaderboard", "pygame"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gopher-typist = "gophertypist.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gophertypist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "draftlottery"
version = "1.0.0"
description = "Weighted draft lottery with an animated elimination reveal"
requires-python = ">=3.10"
keywords = ["draft", "lottery", "fantasy hockey", "weighted draw", "tkinter"]
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
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
draftlottery = "draftlottery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["draftlottery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

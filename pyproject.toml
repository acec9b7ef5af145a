[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardslot"
version = "0.1.0"
description = "A small card-collecting slot machine game played with the mouse"
requires-python = ">=3.10"
keywords = ["game", "slot", "cards", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cardslot = "cardslot.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cardslot"]

[tool.pytest.ini_options]
addopts = "-ra"

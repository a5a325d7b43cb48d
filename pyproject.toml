[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typefaster"
version = "0.1.0"
description = "Keyboard layout geometry, layout definitions and typing statistics for a typing tutor"
requires-python = ">=3.10"
dependencies = []
keywords = ["typing", "tutor", "keyboard", "layout", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["typefaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

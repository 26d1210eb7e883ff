[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grblkit"
version = "0.1.0"
description = "Parsers for grbl and grblHAL controller responses and status report fields"
requires-python = ">=3.10"
dependencies = []
keywords = ["grbl", "grblhal", "cnc", "gcode", "parser", "status report"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["grblkit"]

[tool.pytest.ini_options]
addopts = "-ra"

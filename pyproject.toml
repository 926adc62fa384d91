[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codedrills"
version = "0.1.0"
description = "Small, tested solutions to classic array, string, tree, list, stack, interval and graph exercises."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "exercises", "interview practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codedrills"]

[tool.pytest.ini_options]
addopts = "-ra"

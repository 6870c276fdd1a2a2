[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lessons"
version = "0.1.0"
description = "Small worked examples of core programming ideas, plus a login store and a timed quiz game"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "examples", "oop", "quiz", "login", "tutorial"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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

[project.scripts]
lessons-accounts = "lessons.accounts:main"
lessons-quiz = "lessons.quiz:main"

[tool.hatch.build.targets.wheel]
packages = ["lessons"]

[tool.pytest.ini_options]
addopts = "-ra"

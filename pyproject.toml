[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exlibs"
version = "0.1.0"
description = "Everyday helpers: string utilities, brace-style formatting, file paths, GUIDs, random ranges, a blocking event queue and a small SQLite manager."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "strings", "formatting", "sqlite", "queue", "guid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exlibs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

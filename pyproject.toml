[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soshell"
version = "1.0.0"
description = "A small interactive POSIX shell with built-in commands for calculations, file checks and background copies"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "pipeline", "redirection", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
soshell = "soshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["soshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ccinit"
version = "0.1.0"
description = "Initialize a project's .claude configuration directory from a template tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["claude", "scaffolding", "templates", "configuration", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cc-init = "ccinit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ccinit"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phpvm"
version = "1.1.1"
description = "A simple command-line tool for managing your PHP version"
requires-python = ">=3.10"
keywords = ["php", "version-manager", "composer", "homebrew", "shell"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: MacOS",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
phpvm = "phpvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["phpvm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbfkit"
version = "0.1.0"
description = "Encoding and header-date building blocks for dBASE (.dbf) table files."
requires-python = ">=3.10"
dependencies = []
keywords = ["dbf", "dbase", "encoding", "code-page", "language-driver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: File Formats",
    "Topic :: Software Development :: Internationalization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dbfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

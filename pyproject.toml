[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doksnet"
version = "1.1.2"
description = "A command-line tool that verifies documentation-to-code mappings with content hashes"
requires-python = ">=3.10"
dependencies = []
keywords = ["documentation", "verification", "cli", "mapping", "hash", "blake3"]
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
    "Topic :: Software Development :: Documentation",
    "Topic :: Software Development :: Quality Assurance",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
doksnet = "doksnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["doksnet"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

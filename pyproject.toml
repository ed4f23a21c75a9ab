[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iofree-fs"
version = "1.0.0"
description = "I/O-free, resumable filesystem coroutines with blocking and asyncio runtimes"
requires-python = ">=3.10"
dependencies = []
keywords = ["io-free", "coroutine", "runtime", "file", "directory", "filesystem", "asyncio"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Environment :: Console",
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
iofree-fs = "iofree_fs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iofree_fs"]

[tool.hatch.build.targets.sdist]
include = ["iofree_fs", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["iofree_fs"]

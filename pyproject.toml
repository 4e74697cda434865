[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cync"
version = "0.1.0"
description = "Watch the system clipboard and report whenever its text changes"
requires-python = ">=3.10"
dependencies = []
keywords = ["clipboard", "wayland", "termux", "watcher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Android",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cync = "cync.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cync"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mangen"
version = "1.0"
description = "Generate a manifest of files with SHA-256 checksums"
requires-python = ">=3.10"
dependencies = []
keywords = ["manifest", "sha256", "checksum", "integrity", "files"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
mangen = "mangen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mangen"]

[tool.pytest.ini_options]
addopts = "-ra"

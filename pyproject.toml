[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nearfacsimile"
version = "1.0.9"
description = "Find similar or identical text files in a directory"
requires-python = ">=3.10"
keywords = ["duplicate", "similarity", "similar", "compare", "levenshtein", "jaro", "trigram"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Utilities",
]
dependencies = [
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
near-facsimile = "nearfacsimile.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nearfacsimile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

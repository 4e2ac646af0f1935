[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gingest"
version = "0.1.0"
description = "Convert codebases into LLM-friendly text digests"
requires-python = ">=3.10"
dependencies = []
keywords = ["llm", "digest", "codebase", "git", "jupyter", "markdown"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gingest = "gingest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gingest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beans"
version = "0.1.0"
description = "Data model for a file-based issue tracker that keeps issues as Markdown files with YAML front matter"
requires-python = ">=3.10"
keywords = ["issue-tracker", "markdown", "front-matter", "roadmap", "tasks"]
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
    "Topic :: Software Development :: Bug Tracking",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["beans"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
